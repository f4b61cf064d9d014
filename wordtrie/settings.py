'''Environment-driven configuration for wordtrie.

Values are read when the getters are called rather than at import time so that tests (and
long-running callers) can change the environment.'''
import os
from functools import wraps

from .errors import ConfigurationError

WARN_KEY_LENGTH_VAR = 'WORDTRIE_WARN_KEY_LENGTH'
VERBOSITY_VAR = 'WORDTRIE_VERBOSITY'


def positive_int(func):
  @wraps(func)
  def wrapper(*args, **kwargs):
    raw = func(*args, **kwargs)
    try:
      value = int(raw)
    except (TypeError, ValueError):
      raise ConfigurationError(f'{func.__name__}: expected an integer, got {raw!r}.')
    if value <= 0:
      raise ConfigurationError(f'{func.__name__}: expected a positive integer, got {value}.')
    return value

  return wrapper


# Keys longer than this are still stored; Trie.add logs a warning for them.
@positive_int
def get_warn_key_length():
  return os.getenv(WARN_KEY_LENGTH_VAR, '1000')


def get_log_verbosity():
  return os.getenv(VERBOSITY_VAR, 'info')
