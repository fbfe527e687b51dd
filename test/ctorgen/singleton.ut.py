# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from ctorgen.accessors import accessors
from ctorgen.constructor import Constructible, install_singleton_constructor, singleton_constructor
from utest import utest, utest_call, utest_exc, utest_val


@singleton_constructor()
@accessors('a', 'b')
class Config(Constructible):
  DEFAULTS = {'b': 'default'}


@utest_call
def test_singleton() -> None:
  first = Config.new(a=1)
  second = Config.new(a=2, b=3) # Arguments after the first call are ignored.
  utest_val(True, first is second, 'same instance')
  utest_val({'a': 1, 'b': 'default'}, dict(second._store), 'second arguments have no effect')
  utest_val(True, Config.new() is first, 'no arguments')


# The companion constructor is an ordinary constructor.
utest(False, lambda: Config.new_instance(a=5) is Config.new())
utest({'a': 5, 'b': 'default'}, lambda: dict(Config.new_instance(a=5)._store))

utest_val('Config.new', Config.new.__qualname__, 'singleton qualname')
utest_val(True, 'singleton' in Config.new.__doc__, 'singleton doc')


# Each generated name has its own instance.

@accessors('x')
class Registry(Constructible): pass

utest(Registry, install_singleton_constructor, Registry, 'default', 'other')

@utest_call
def test_names() -> None:
  d = Registry.default(x=1)
  o = Registry.other(x=2)
  utest_val(False, d is o, 'separate instances')
  utest_val(1, Registry.default().x, 'default')
  utest_val(2, Registry.other().x, 'other')


# Construction failures do not populate the cache.

@singleton_constructor()
@accessors('x')
class Fragile(Constructible): pass

utest_exc(AttributeError, Fragile.new, missing=1)
utest(1, lambda: Fragile.new(x=1).x)
utest(1, lambda: Fragile.new(x=2).x)

class Plain: pass

utest_exc(TypeError, install_singleton_constructor, Plain)
