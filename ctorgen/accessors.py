# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Accessor makers for constructible classes.

Each maker installs properties (and, for boolean and set fields, helper methods) on a class.
The generated accessors read and write the instance's field store, `self._store`,
so that every write can be observed by a `DirtyFieldStore`.
Each maker returns the class, so that calls can be chained or used as class decorators.
'''

from typing import Any, Callable, Iterable, TypeVar

from .meta import rename


_C = TypeVar('_C', bound=type)


def mk_accessors(cls:_C, *names:str) -> _C:
  'Install a read/write property for each name. Unset fields read as None.'
  for name in names:
    setattr(cls, name, _scalar_property(cls, name))
  return cls


def mk_boolean_accessors(cls:_C, *names:str) -> _C:
  '''
  Install a boolean property for each name, plus `set_<name>()` and `clear_<name>()` methods.
  Unset fields read as False.
  The flag methods ignore any arguments, so they can also be named as constructor fields.
  '''
  for name in names:
    setattr(cls, name, _boolean_property(cls, name))
    _install_method(cls, f'set_{name}', _flag_writer(name, True))
    _install_method(cls, f'clear_{name}', _flag_writer(name, False))
  return cls


def mk_set_accessors(cls:_C, *names:str) -> _C:
  '''
  Install a set-valued property for each name.
  Reading returns a frozenset snapshot; assigning replaces the contents from an iterable
  (a bare string counts as a single member).
  Also install `<name>_insert(*items)`, `<name>_remove(*items)`, `<name>_contains(item)`,
  `<name>_clear()` and `size_<name>()`.
  Every modification stores a new set, so it is observed as a write to the field.
  '''
  for name in names:
    setattr(cls, name, _set_property(cls, name))
    for method_name, method in _set_methods(name):
      _install_method(cls, method_name, method)
  return cls


def _flag_writer(name:str, value:bool) -> Callable[...,None]:
  def write_flag(self:Any, *ignored:Any) -> None:
    self._store.store(name, value)
  return write_flag


def _set_methods(name:str) -> list[tuple[str,Callable[...,Any]]]:
  'Return the named helper methods for set field `name`.'

  def insert(self:Any, *items:Any) -> None:
    self._store.store(name, set(self._store.get(name, ())).union(items))

  def remove(self:Any, *items:Any) -> None:
    self._store.store(name, set(self._store.get(name, ())).difference(items))

  def contains(self:Any, item:Any) -> bool:
    return item in self._store.get(name, ())

  def clear(self:Any) -> None:
    self._store.store(name, set())

  def size(self:Any) -> int:
    return len(self._store.get(name, ()))

  return [
    (f'{name}_insert', insert),
    (f'{name}_remove', remove),
    (f'{name}_contains', contains),
    (f'{name}_clear', clear),
    (f'size_{name}', size),
  ]


def accessors(*names:str) -> Callable[[_C], _C]:
  'Class decorator form of `mk_accessors`.'
  return lambda cls: mk_accessors(cls, *names)


def boolean_accessors(*names:str) -> Callable[[_C], _C]:
  'Class decorator form of `mk_boolean_accessors`.'
  return lambda cls: mk_boolean_accessors(cls, *names)


def set_accessors(*names:str) -> Callable[[_C], _C]:
  'Class decorator form of `mk_set_accessors`.'
  return lambda cls: mk_set_accessors(cls, *names)


def _scalar_property(cls:type, name:str) -> property:

  def get(self:Any) -> Any:
    return self._store.get(name)

  def set_(self:Any, value:Any) -> None:
    self._store.store(name, value)

  return _property(cls, name, get, set_, doc=f'Scalar field `{name}`.')


def _boolean_property(cls:type, name:str) -> property:

  def get(self:Any) -> bool:
    return bool(self._store.get(name, False))

  def set_(self:Any, value:Any) -> None:
    self._store.store(name, bool(value))

  return _property(cls, name, get, set_, doc=f'Boolean field `{name}`.')


def _set_property(cls:type, name:str) -> property:

  def get(self:Any) -> frozenset:
    return frozenset(self._store.get(name, ()))

  def set_(self:Any, value:Iterable[Any]|str) -> None:
    self._store.store(name, {value} if isinstance(value, str) else set(value))

  return _property(cls, name, get, set_, doc=f'Set field `{name}`.')


def _property(cls:type, name:str, get:Callable, set_:Callable, doc:str) -> property:
  qualname = f'{cls.__qualname__}.{name}'
  rename(get, name, qualname=qualname, module=cls.__module__)
  rename(set_, name, qualname=qualname, module=cls.__module__)
  return property(get, set_, doc=doc)


def _install_method(cls:type, name:str, fn:Callable) -> None:
  rename(fn, name, qualname=f'{cls.__qualname__}.{name}', module=cls.__module__)
  setattr(cls, name, fn)
