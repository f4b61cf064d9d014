"""wordtrie logger wrapper.

Wraps the abseil logging module, prefixing messages with the current context stack
(e.g. 'build_trie|words.txt|...')."""

import contextlib
import inspect

from absl import logging

from . import settings

logging.set_verbosity(settings.get_log_verbosity())

_context_list = []


def set_verbosity(level):
  logging.set_verbosity(level)


def push_context(value):
  _context_list.append(str(value))


def pop_context():
  _context_list.pop()


@contextlib.contextmanager
def context(value):
  push_context(value)
  try:
    yield
  finally:
    pop_context()


def _prefixed(message):
  if not _context_list:
    return message
  return f'{"|".join(_context_list)}|{message}'


def info(message, *args, log=True, **kwargs):
  if log:
    logging.info(_prefixed(message), *args, **kwargs)


def debug(message, *args, log=True, **kwargs):
  if log:
    logging.debug(_prefixed(message), *args, **kwargs)


def warning(message, *args, log=True, **kwargs):
  if log:
    logging.warning(_prefixed(message), *args, **kwargs)


def error(message, *args, log=True, **kwargs):
  if log:
    logging.error(_prefixed(message), *args, **kwargs)


# Make the Abseil logging module ignore the functions in this module when
# logging line numbers and functions.
for item in dir():
  if inspect.isfunction(globals()[item]):
    logging.skip_log_prefix(item)
