# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Cumulative class-level declarations.

A declaration is a class attribute such as `DEFAULTS` or `FIRST_CONSTRUCTOR_ARGS`.
Each class in an inheritance chain may declare its own value;
the functions here merge those values explicitly over the ancestor list, ordered most-derived last.
Only the declarations found in each class's own namespace participate,
so an inherited attribute is never counted twice.
'''

from typing import Any, Iterable, Mapping

from .exceptions import DeclarationError


def ancestors(cls:type) -> list[type]:
  'Return the method resolution order of `cls`, reversed so that the most-derived class is last.'
  return list(reversed(cls.__mro__))


def own_declarations(cls:type, name:str) -> list[tuple[type,Any]]:
  'Return (class, value) pairs for each ancestor of `cls` that declares `name` in its own namespace.'
  return [(c, vars(c)[name]) for c in ancestors(cls) if name in vars(c)]


def every_hash(cls:type, name:str) -> dict[Any,Any]:
  '''
  Merge the mapping declarations named `name` across the ancestors of `cls`.
  Values declared by more-derived classes override those of their ancestors for identical keys.
  '''
  merged:dict[Any,Any] = {}
  for c, decl in own_declarations(cls, name):
    if not isinstance(decl, Mapping):
      raise DeclarationError(f'{c.__qualname__}.{name}: expected a mapping; received {decl!r}')
    merged.update(decl)
  return merged


def every_list(cls:type, name:str) -> list[Any]:
  '''
  Concatenate the list declarations named `name` across the ancestors of `cls`, most-derived last.
  Duplicates are removed, keeping the first occurrence.
  A declaration that is a single string counts as one item.
  '''
  items:list[Any] = []
  seen:set[Any] = set()
  for c, decl in own_declarations(cls, name):
    for item in _declared_items(c, name, decl):
      if item in seen: continue
      seen.add(item)
      items.append(item)
  return items


def every_set(cls:type, name:str) -> set[Any]:
  'Return the union of the list declarations named `name` across the ancestors of `cls`.'
  return set(every_list(cls, name))


def _declared_items(c:type, name:str, decl:Any) -> Iterable[Any]:
  if isinstance(decl, str): return (decl,)
  if isinstance(decl, Mapping) or not isinstance(decl, Iterable):
    raise DeclarationError(f'{c.__qualname__}.{name}: expected a sequence of names; received {decl!r}')
  return decl
