# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any

from ctorgen.accessors import accessors
from ctorgen.constructor import Constructible, constructor, constructor_with_dirty, install_constructor_with_dirty
from ctorgen.store import DirtyFieldStore, FieldStore
from utest import utest, utest_call, utest_val


@constructor_with_dirty()
@accessors('a', 'b', 'c')
class Tracked(Constructible): pass


class Hygienic(Tracked):
  HYGIENIC = ('b',)


class Unhygienic(Hygienic):
  UNHYGIENIC = ('a',)


def dirtied_by(cls:Any, **args:Any) -> bool:
  'Construct a clean object, write `args` through the accessors, and return the dirty flag.'
  obj = cls.new()
  for k, v in args.items():
    setattr(obj, k, v)
  return obj.dirty


utest(DirtyFieldStore, lambda: type(Tracked.new()._store))
utest(False, lambda: Tracked.new().dirty) # Populating the exemption sets does not leave the object dirty.
utest(True, lambda: Tracked.new(a=1).dirty) # Constructor arguments are written after the flag is cleared.

# The flag helpers can be named as constructor fields.
utest(True, lambda: Tracked.new(set_dirty=1).dirty)
utest(False, lambda: Tracked.new(a=1, clear_dirty=1).dirty) # 'a' sorts before 'clear_dirty'.

utest(frozenset({'dirty', 'hygienic', 'unhygienic'}), lambda: Tracked.new().hygienic)
utest(frozenset({'dirty', 'hygienic', 'unhygienic', 'b'}), lambda: Hygienic.new().hygienic)
utest(frozenset({'a'}), lambda: Unhygienic.new().unhygienic)

# Default exemptions.
utest(True, dirtied_by, Tracked, a=1)
utest(False, dirtied_by, Tracked, hygienic=['x'])
utest(False, dirtied_by, Tracked, unhygienic=[])

# Declared hygienic fields.
utest(True, dirtied_by, Hygienic, a=1)
utest(False, dirtied_by, Hygienic, b=1)

# Unhygienic fields supersede hygienic ones.
utest(True, dirtied_by, Unhygienic, a=1)
utest(False, dirtied_by, Unhygienic, c=1) # Not hygienic, but not unhygienic either.
utest(False, dirtied_by, Unhygienic, b=1)


@utest_call
def test_flag_transitions() -> None:
  obj = Tracked.new()
  obj.b = 2
  utest_val(True, obj.dirty, 'write dirties')
  obj.b = 3
  utest_val(True, obj.dirty, 'stays dirty')
  obj.clear_dirty()
  utest_val(False, obj.dirty, 'clear_dirty')
  obj.set_dirty()
  utest_val(True, obj.dirty, 'set_dirty')
  obj.clear_dirty()
  obj._store['c'] = 4 # Writes that bypass the accessors are observed too.
  utest_val(True, obj.dirty, 'direct store write')


@utest_call
def test_reinitialize() -> None:
  obj = Tracked.new(a=1)
  obj.clear_dirty()
  store = obj._store
  obj.new(a=2)
  utest_val(True, obj._store is store, 'reinitialization keeps the store')
  utest_val(True, obj.dirty, 'reinitialization writes are observed')


@utest_call
def test_exemption_accessors() -> None:
  obj = Tracked.new()
  obj.hygienic_insert('a')
  obj.a = 1
  utest_val(False, obj.dirty, 'hygienic_insert')
  obj.unhygienic_insert('c')
  utest_val(1, obj.size_unhygienic(), 'size_unhygienic')
  obj.a = 2
  utest_val(False, obj.dirty, 'not unhygienic')
  obj.c = 1
  utest_val(True, obj.dirty, 'unhygienic')


# Dirty tracking can start further down a hierarchy.

@constructor()
@accessors('x')
class Untracked(Constructible): pass

class TrackedBelow(Untracked): pass

install_constructor_with_dirty(TrackedBelow)

utest(FieldStore, lambda: type(Untracked.new(x=1)._store))
utest(False, lambda: Untracked.new(x=1).dirty)
utest(DirtyFieldStore, lambda: type(TrackedBelow.new(x=1)._store))
utest(True, lambda: TrackedBelow.new(x=1).dirty)
