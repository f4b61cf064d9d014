import pytest

from wordtrie import build_trie, settings
from wordtrie.trie import Trie
from wordtrie.trie_logging import context, pop_context, push_context, _prefixed


@pytest.fixture
def words_file(tmp_path):
  path = tmp_path / 'words.txt'
  path.write_text('cat car car\ncar  cars\n\nhe hello\n', encoding='utf-8')
  return str(path)


def test_build_trie(words_file):
  trie = build_trie.build_trie(words_file, verbose=False)
  assert trie.words() == ['cat', 'car', 'cars', 'he', 'hello']
  assert trie.frequency('car') == 4
  assert trie.frequency('cars') == 1


def test_main_queries(words_file, capsys):
  code = build_trie.run([
      words_file, '--complete', 'ca', '--words-with-prefix', 'ca', '--longest-prefix', 'help',
      '--frequency', 'car', '--quiet'
  ])
  assert code == 0
  out = capsys.readouterr().out.splitlines()
  assert out == ['r', 'cat car cars', 'he', '4']


def test_main_forced(words_file, capsys):
  assert build_trie.run([words_file, '--complete', 'car', '--quiet']) == 0
  assert build_trie.run([words_file, '--complete', 'car', '--forced', '--quiet']) == 0
  assert capsys.readouterr().out.splitlines() == ['<none>', 's']


def test_main_dump(words_file, capsys):
  assert build_trie.main(words_file, dump=True, verbose=False) == 0
  assert capsys.readouterr().out.strip() == 'chaetrlslo'


def test_main_long_words(tmp_path, monkeypatch, capsys):
  monkeypatch.setenv(settings.WARN_KEY_LENGTH_VAR, '4')
  path = tmp_path / 'long.txt'
  path.write_text('carousel carousel cart\n', encoding='utf-8')
  assert build_trie.main(str(path), complete='ca', frequency='carousel', verbose=False) == 0
  assert capsys.readouterr().out.splitlines() == ['rousel', '2']


def test_main_missing_file(tmp_path, capsys):
  assert build_trie.main(str(tmp_path / 'missing.txt'), complete='ca', verbose=False) == 1
  assert capsys.readouterr().out == ''


def test_quiet_build_skips_word_count(words_file, monkeypatch):
  def fail(self):
    raise AssertionError('len() called')

  monkeypatch.setattr(Trie, '__len__', fail)
  trie = build_trie.build_trie(words_file, verbose=False)
  assert trie.is_valid('hello')


def test_logging_context():
  assert _prefixed('msg') == 'msg'
  with context('outer'):
    push_context('inner')
    assert _prefixed('msg') == 'outer|inner|msg'
    pop_context()
    assert _prefixed('msg') == 'outer|msg'
  assert _prefixed('msg') == 'msg'
