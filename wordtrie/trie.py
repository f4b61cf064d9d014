'''A character-indexed Trie with per-insertion frequency counts.

Classic tries for autocomplete keep a frequency on each node and a pointer to the most frequent
child. This implementation does exactly that: every insertion increments the frequency of each node
it passes through, and each node caches the key of its highest-frequency child so that completion
is O(depth) rather than a scan of the subtree.

Completion is greedy - at each step it follows the locally most frequent child until it reaches a
complete word. It is not the globally most frequent word beneath the prefix.

Ties between children are resolved in favour of whichever key reached the maximum first; a later
child must strictly exceed it to take over. Each node stamps its children as their frequency
changes so the same rule holds when the cached child is removed.

Every traversal is an explicit loop, so string length is bounded by memory only.
'''
from collections import deque
from typing import List, Optional

import attr

from . import settings
from .trie_logging import debug, warning


# eq=False so that attrs doesn't add an __eq__ - node comparisons are id-based.
@attr.s(slots=True, eq=False)
class Node:
  children = attr.ib(factory=dict)
  is_terminal = attr.ib(False)
  frequency = attr.ib(0)
  most_frequent_child_key = attr.ib(None)
  # Number of child increments seen by this node.
  increments = attr.ib(0)
  # Parent's |increments| at the time this node reached its current frequency.
  reached_at = attr.ib(0)

  def increment_child(self, char):
    self.increments += 1
    child = self.children[char]
    child.frequency += 1
    child.reached_at = self.increments
    if (self.most_frequent_child_key is None or
        self.children[self.most_frequent_child_key].frequency < child.frequency):
      self.most_frequent_child_key = char

  def detach_child(self, char):
    del self.children[char]
    if self.most_frequent_child_key == char:
      # Search for next greatest child; on ties, whichever got there first.
      self.most_frequent_child_key = max(
          self.children,
          key=lambda c: (self.children[c].frequency, -self.children[c].reached_at),
          default=None)

  def clear(self):
    self.children.clear()
    self.is_terminal = False
    self.frequency = 0
    self.most_frequent_child_key = None
    self.increments = 0
    self.reached_at = 0

  def has_children(self):
    return bool(self.children)

  def _to_str(self):
    lines = []
    stack = [(c, node, '') for c, node in reversed(self.children.items())]
    while stack:
      c, node, indent = stack.pop()
      lines.append(f'{indent}{c}{"*" if node.is_terminal else ""} ({node.frequency})\n')
      stack.extend((c, child, indent + '  ') for c, child in reversed(node.children.items()))
    return ''.join(lines)


@attr.s(eq=False)
class Trie:
  root = attr.ib(factory=Node)
  # Advisory only: longer strings are stored but logged.
  warn_key_length = attr.ib(factory=settings.get_warn_key_length)

  def add(self, string: Optional[str]) -> None:
    '''Inserts |string|, incrementing the frequency of every node along its path.

    Adding the empty string marks the root as terminal without touching any frequency.'''
    if string is None:
      return
    if len(string) > self.warn_key_length:
      warning('Adding a key of length %d (warn_key_length=%d)', len(string), self.warn_key_length)
    node = self.root
    path = []
    for char in string:
      if char not in node.children:
        node.children[char] = Node()
      path.append((node, char))
      node = node.children[char]
    node.is_terminal = True
    for parent, char in reversed(path):
      parent.increment_child(char)
    debug('Added %r', string)

  def remove(self, string: Optional[str]) -> None:
    '''Unmarks |string| as a word and prunes any branch left with neither words nor children.

    Removing a string which isn't a word is a no-op. Frequencies are left as they are.'''
    if string is None:
      return
    node = self.root
    path = []
    for char in string:
      child = node.children.get(char)
      if child is None:  # Not in the trie - nothing to remove.
        return
      path.append((node, char))
      node = child
    if not node.is_terminal:
      return
    node.is_terminal = False
    # Walk back up detaching dead nodes. The root is never detached.
    for parent, char in reversed(path):
      child = parent.children[char]
      if child.is_terminal or child.has_children():
        break
      parent.detach_child(char)
    debug('Removed %r', string)

  def clear(self) -> None:
    self.root.clear()
    debug('Cleared')

  def _get(self, string) -> Optional[Node]:
    if string is None:
      return None
    node = self.root
    for char in string:
      node = node.children.get(char)
      if node is None:
        return None
    return node

  def contains(self, string: Optional[str]) -> bool:
    '''True if |string| is a path in the trie, whether or not it is a complete word.'''
    return self._get(string) is not None

  def is_valid(self, string: Optional[str]) -> bool:
    '''True if |string| was inserted as a whole word (and not since removed).'''
    node = self._get(string)
    return node is not None and node.is_terminal

  is_word = is_valid

  def frequency(self, string: Optional[str]) -> int:
    node = self._get(string)
    if node is None:
      return 0
    return node.frequency

  def longest_prefix(self, string: Optional[str]) -> str:
    '''Returns the longest word in the trie which prefixes |string|, or '' if there is none.'''
    if string is None:
      return ''
    node = self.root
    length = 0
    depth = 0
    while True:
      if node.is_terminal:
        length = depth
      if depth == len(string):
        break
      node = node.children.get(string[depth])
      if node is None:
        break
      depth += 1
    return string[:length]

  def completion(self, string: Optional[str]) -> Optional[str]:
    '''Returns the most frequent suffix to append to |string|.

    None if there is none or if |string| is already a word.'''
    return self._completion(string, force=False)

  def completion_forced(self, string: Optional[str]) -> Optional[str]:
    '''Like completion, but suggests a suffix even if |string| is already a word.'''
    return self._completion(string, force=True)

  def _completion(self, string, force):
    node = self._get(string)
    if node is None:
      return None
    if (node.is_terminal and not force) or node.most_frequent_child_key is None:
      return None
    chars = []
    while True:
      char = node.most_frequent_child_key
      chars.append(char)
      node = node.children[char]
      if node.is_terminal:
        return ''.join(chars)

  def words(self) -> List[str]:
    return self._collect(self.root, '')

  def words_with_prefix(self, prefix: Optional[str]) -> List[str]:
    node = self._get(prefix)
    if node is None:
      return []
    return self._collect(node, prefix)

  def _collect(self, node, prefix):
    '''Depth-first, children in insertion order.'''
    out = []
    stack = [(node, prefix)]
    while stack:
      node, path = stack.pop()
      if node.is_terminal:
        out.append(path)
      stack.extend((child, path + char) for char, child in reversed(node.children.items()))
    return out

  def pretty(self):
    '''Indented rendering: one line per node with its frequency; words are marked with a '*'.'''
    return self.root._to_str()

  def __str__(self):
    # BFS over edges.
    queue = deque([self.root])
    chars = []
    while queue:
      node = queue.popleft()
      for char, child in node.children.items():
        chars.append(char)
        queue.append(child)
    return ''.join(chars)

  def __contains__(self, string):
    return self.is_valid(string)

  def __iter__(self):
    return iter(self.words())

  def __len__(self):
    return len(self.words())
