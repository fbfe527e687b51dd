# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import inspect
from types import FrameType
from typing import Any, TypeVar


class MetaprogrammingError(Exception): pass


_A = TypeVar('_A', bound=Any)

def rename(obj:_A, name:str|None=None, qualname:str|None=None, module:str|None=None) -> _A:
  '''
  Returns `obj`, after renaming name, qualified name and/or module.
  If `qualname` is omitted, it is set to `name`.
  '''
  if name is not None:
    obj.__name__ = name
    obj.__qualname__ = name
  if qualname is not None:
    obj.__qualname__ = qualname
  if module is not None:
    obj.__module__ = module
  return obj


def caller_frame(steps:int) -> FrameType:
  '''
  Returns the call frame `steps` above the immediate caller.
  steps=0 is useful when calling this function from the module scope.
  steps=1 is useful when calling this function from a function that wants to know about its own caller.
  '''
  f = inspect.currentframe() # This frame.
  if f is None: raise MetaprogrammingError('no current frame')
  f = f.f_back # Immediate caller's frame.
  if f is None: raise MetaprogrammingError('no caller frame')
  for i in range(steps):
    p = f
    f = f.f_back
    if f is None: raise MetaprogrammingError(f'no caller frame (step {i+1}); previous: {p!r}')
  return f


def is_settable_attr(attr:Any) -> bool:
  '''
  Returns True if `attr`, a raw class attribute as returned by `inspect.getattr_static`,
  can assign a value: either a data descriptor with a usable `__set__`, or a plain function.
  A property without a setter is not settable.
  '''
  if isinstance(attr, property): return attr.fset is not None
  if inspect.isfunction(attr): return True
  return hasattr(type(attr), '__set__')
