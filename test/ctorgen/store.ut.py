# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from ctorgen.store import DirtyFieldStore, FieldStore
from utest import utest, utest_call, utest_exc, utest_val


@utest_call
def test_field_store() -> None:
  s = FieldStore()
  s.store('a', 1)
  s['b'] = 2
  utest_val({'a': 1, 'b': 2}, dict(s), 'store and setitem')
  utest(1, s.get, 'a')
  utest(None, s.get, 'missing')
  utest_exc(KeyError('missing'), s.__getitem__, 'missing')
  del s['a']
  utest_val(['b'], list(s), 'delete')
  utest_val(1, len(s), 'len')
  utest_val("FieldStore({'b': 2})", repr(s), 'repr')


def dirty_store(hygienic=(), unhygienic=()) -> DirtyFieldStore:
  s = DirtyFieldStore()
  s.hygienic_insert(*hygienic)
  s.unhygienic_insert(*unhygienic)
  return s


def dirtied_by(key:str, hygienic=(), unhygienic=()) -> bool:
  s = dirty_store(hygienic, unhygienic)
  s.store(key, 'value')
  return s.is_dirty


_std_hygienic = ('dirty', 'hygienic', 'unhygienic')

# The flag and exemption operations are not observed as writes.
utest(False, lambda: dirty_store(_std_hygienic, ['x']).is_dirty)

# Hygienic only.
utest(True, dirtied_by, 'a', hygienic=_std_hygienic)
utest(False, dirtied_by, 'hygienic', hygienic=_std_hygienic)
utest(False, dirtied_by, 'unhygienic', hygienic=_std_hygienic)
utest(True, dirtied_by, 'a') # No exemptions at all.

# A non-empty unhygienic set supersedes the hygienic set.
utest(True, dirtied_by, 'a', hygienic=['a'], unhygienic=['a'])
utest(False, dirtied_by, 'b', hygienic=['a'], unhygienic=['a'])
utest(False, dirtied_by, 'b', unhygienic=['a'])


@utest_call
def test_dirty_flag() -> None:
  s = dirty_store(_std_hygienic)
  utest_val(False, s.is_dirty, 'initially clean')
  s.store('x', 1)
  utest_val(True, s.is_dirty, 'dirtied')
  utest_val(1, s['x'], 'the write happens')
  s.store('x', 2)
  utest_val(True, s.is_dirty, 'stays dirty')
  s.clear_dirty()
  utest_val(False, s.is_dirty, 'cleared')
  s['y'] = 3 # Item assignment is intercepted too.
  utest_val(True, s.is_dirty, 'setitem dirties')


@utest_call
def test_exemption_sets() -> None:
  s = DirtyFieldStore()
  utest_val(0, s.size_hygienic(), 'empty hygienic')
  s.hygienic_insert('a', 'b')
  utest_val(2, s.size_hygienic(), 'hygienic insert')
  utest_val(True, s.hygienic_contains('a'), 'hygienic contains')
  s.hygienic_remove('a', 'missing')
  utest_val(False, s.hygienic_contains('a'), 'hygienic remove')
  s.unhygienic_insert('c')
  utest_val(1, s.size_unhygienic(), 'unhygienic insert')
  s.unhygienic_remove('c')
  utest_val(0, s.size_unhygienic(), 'unhygienic remove')
  utest_val(False, s.is_dirty, 'exemption edits do not dirty')
