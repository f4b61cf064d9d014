'''Builds a Trie from a file of whitespace-separated words and runs queries against it.

Every occurrence of a word is inserted, so frequencies reflect how often each word appears.'''
import argparse
import sys

from .trie import Trie
from .trie_logging import context, error, info


def read_words(filename):
  with open(filename, encoding='utf-8') as f:
    for line in f:
      yield from line.split()


def build_trie(filename, verbose=True):
  trie = Trie()
  num_words = 0
  with context(filename):
    for word in read_words(filename):
      trie.add(word)
      num_words += 1
    if verbose:
      info(f'Inserted {num_words} words ({len(trie)} distinct).')
  return trie


def _format(value):
  return '<none>' if value is None else value


def main(words_file,
         complete=None,
         forced=False,
         words_with_prefix=None,
         longest_prefix=None,
         frequency=None,
         dump=False,
         verbose=True):
  try:
    trie = build_trie(words_file, verbose=verbose)
  except OSError as e:
    error(f'Failed to read {words_file}: {e}')
    return 1

  if complete is not None:
    suggestion = trie.completion_forced(complete) if forced else trie.completion(complete)
    print(_format(suggestion))
  if words_with_prefix is not None:
    print(' '.join(trie.words_with_prefix(words_with_prefix)))
  if longest_prefix is not None:
    print(trie.longest_prefix(longest_prefix))
  if frequency is not None:
    print(trie.frequency(frequency))
  if dump:
    print(str(trie))
  return 0


def make_parser():
  parser = argparse.ArgumentParser(description=__doc__)
  parser.add_argument('words_file')
  parser.add_argument('--complete', metavar='PREFIX')
  parser.add_argument('--forced', action='store_true',
                      help='Suggest a completion for --complete even if it is already a word.')
  parser.add_argument('--words-with-prefix', metavar='PREFIX')
  parser.add_argument('--longest-prefix', metavar='STRING')
  parser.add_argument('--frequency', metavar='STRING')
  parser.add_argument('--dump', action='store_true')
  parser.add_argument('--quiet', dest='verbose', action='store_false')
  return parser


def run(argv=None):
  args = make_parser().parse_args(argv)
  return main(**vars(args))


if __name__ == '__main__':
  sys.exit(run())
