# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Constructor generation.

`install_constructor` installs constructors that build an object from named arguments,
by calling the setter of each named field.

# Usage
```
@constructor()
@accessors('a', 'b')
class Simple(Constructible):
  DEFAULTS = {'a': 7, 'b': 'default'}

Simple.new()                # a == 7, b == 'default'.
Simple.new(a=1)             # a == 1, b == 'default'.
Simple.new({'a': 1})        # Same.
Simple.new('a', 1, 'b', 2)  # a == 1, b == 2.
```

A generated constructor proceeds as follows:
* When invoked on the class, allocate a new object; when invoked on an instance, reinitialize that instance.
* Munge the raw arguments into a mapping of field names to values,
  either with the class's `munge_constructor_args` method or with the default rule:
  a single mapping argument is expanded; otherwise positional arguments alternate names and values.
  Keyword arguments are added last.
* Merge the arguments over the cumulative `DEFAULTS` of the class.
* Sort the field names, either with the class's `sort_constructor_args` comparator,
  or with the names in the cumulative `FIRST_CONSTRUCTOR_ARGS` first and then lexically.
  Names within either partition are ordered lexically, not by declaration order.
* Call the setter for each field in order; a missing setter is fatal.
* Call the `init` method, if any, with all of the merged arguments.

Defaults, sort order and setters are computed once per runtime class and cached for the life of the process,
so declarations must be static.
'''

from dataclasses import dataclass, field
from functools import cmp_to_key
from inspect import getattr_static, isfunction
from threading import Lock
from typing import Any, Callable, Mapping, TypeVar

from .accessors import mk_boolean_accessors, mk_set_accessors
from .exceptions import ConstructorArgsError, MissingSetterError
from .inherited import every_hash, every_list
from .io import err_stack
from .meta import caller_frame, is_settable_attr, rename
from .store import DirtyFieldStore, FieldStore


_C = TypeVar('_C', bound=type)

Setter = Callable[[Any,Any],None]


class Constructible:
  '''
  Base class for classes with generated constructors.

  Every instance keeps its fields in a field store, `_store`.
  The `dirty` flag and the `hygienic` and `unhygienic` exemption sets are available on all subclasses;
  they only take effect for objects allocated by a constructor installed with `dirty=True`.
  '''

  HYGIENIC = ('dirty', 'hygienic', 'unhygienic')

  _store: FieldStore

  def __new__(cls, *args:Any, **kwargs:Any) -> Any:
    self = super().__new__(cls)
    self._store = FieldStore()
    return self


mk_boolean_accessors(Constructible, 'dirty')
mk_set_accessors(Constructible, 'hygienic', 'unhygienic')


@dataclass
class ConstructorPlan:
  'The construction policy of a single runtime class.'
  cls:type
  defaults:dict[Any,Any]
  sort_key:Callable[[Any],Any]|None
  munger:Any # Raw class attribute, bound on each call.
  init:Any # Ditto.
  hygienic:list[str]
  unhygienic:list[str]
  setters:dict[str,Setter] = field(default_factory=dict)


  def munge(self, obj:Any, args:tuple[Any,...], kwargs:dict[str,Any]) -> dict[Any,Any]:
    if self.munger is None: return munge_args(args, kwargs)
    return dict(self.munger.__get__(obj, self.cls)(*args, **kwargs))


  def merge(self, obj:Any, args:tuple[Any,...], kwargs:dict[str,Any]) -> dict[Any,Any]:
    'Munge the raw arguments and merge them over the defaults.'
    return {**self.defaults, **self.munge(obj, args, kwargs)}


  def ordered_names(self, merged:Mapping[Any,Any]) -> list[Any]:
    'Sort the field names. A non-string name can have no setter, and may not be comparable with the others.'
    for name in merged:
      if not isinstance(name, str): raise MissingSetterError(cls=self.cls, name=name)
    return sorted(merged, key=self.sort_key)


  def setter(self, name:Any) -> Setter:
    'Resolve the setter for field `name`, or raise `MissingSetterError`.'
    try: return self.setters[name]
    except KeyError: pass
    attr = getattr_static(self.cls, name, None) if isinstance(name, str) else None
    if attr is None or not is_settable_attr(attr): raise MissingSetterError(cls=self.cls, name=name)
    setter:Setter = attr if isfunction(attr) else attr.__set__
    self.setters[name] = setter
    return setter


  def dispatch(self, obj:Any, merged:Mapping[Any,Any]) -> None:
    'Call the setter of each field in sorted order. There is no rollback if a setter is missing.'
    for name in self.ordered_names(merged):
      self.setter(name)(obj, merged[name])


  def call_init(self, obj:Any, merged:Mapping[Any,Any]) -> None:
    if self.init is None: return
    self.init.__get__(obj, self.cls)(**merged)


_plans:dict[type,ConstructorPlan] = {}
_plans_lock = Lock()


def plan_for(cls:type) -> ConstructorPlan:
  'Return the cached construction plan for `cls`, creating it on first use.'
  try: return _plans[cls]
  except KeyError: pass
  with _plans_lock:
    try: return _plans[cls]
    except KeyError: pass
    plan = _plans[cls] = make_plan(cls)
  return plan


def make_plan(cls:type) -> ConstructorPlan:
  'Compute the construction plan for `cls` from its cumulative declarations and hooks.'
  comparator = getattr(cls, 'sort_constructor_args', None)
  if comparator is not None:
    sort_key = cmp_to_key(comparator)
  else:
    first = frozenset(every_list(cls, 'FIRST_CONSTRUCTOR_ARGS'))
    sort_key = (lambda name: (name not in first, name)) if first else None
  return ConstructorPlan(
    cls=cls,
    defaults=every_hash(cls, 'DEFAULTS'),
    sort_key=sort_key,
    munger=getattr_static(cls, 'munge_constructor_args', None),
    init=getattr_static(cls, 'init', None),
    hygienic=every_list(cls, 'HYGIENIC'),
    unhygienic=every_list(cls, 'UNHYGIENIC'))


def munge_args(args:tuple[Any,...], kwargs:Mapping[str,Any]) -> dict[Any,Any]:
  '''
  The default argument munging rule.
  A single mapping argument is expanded into its items;
  otherwise the positional arguments are alternating names and values.
  Keyword arguments are merged last.
  '''
  if len(args) == 1 and isinstance(args[0], Mapping):
    munged = dict(args[0])
  else:
    if len(args) % 2:
      raise ConstructorArgsError(f'expected a mapping or alternating name/value arguments; received {args!r}')
    munged = dict(zip(args[0::2], args[1::2]))
  munged.update(kwargs)
  return munged


class ConstructorMethod:
  '''
  Descriptor for a generated constructor.
  Accessed on a class, the resulting callable allocates a new object;
  accessed on an instance, it reinitializes that instance.
  '''

  def __init__(self, owner:type, name:str, dirty:bool) -> None:
    self.owner = owner
    self.name = name
    self.dirty = dirty
    self.__doc__ = _generated_doc(_constructor_purpose, owner, name)


  def __repr__(self) -> str:
    return f'<{type(self).__name__} {self.owner.__qualname__}.{self.name} dirty={self.dirty}>'


  def __get__(self, obj:Any, cls:type|None=None) -> Callable[...,Any]:
    if cls is None: cls = type(obj)
    owner_cls = cls

    def construct_fn(*args:Any, **kwargs:Any) -> Any:
      return self.construct(obj, owner_cls, args, kwargs)

    construct_fn.__doc__ = self.__doc__
    return rename(construct_fn, self.name, qualname=f'{cls.__qualname__}.{self.name}', module=cls.__module__)


  def construct(self, obj:Any, cls:type, args:tuple[Any,...], kwargs:dict[str,Any]) -> Any:
    if obj is None:
      obj = self.allocate(cls)
    plan = plan_for(type(obj))
    merged = plan.merge(obj, args, kwargs)
    try: plan.dispatch(obj, merged)
    except MissingSetterError as e:
      if not e.reported: # Report from the innermost construction only.
        e.reported = True
        err_stack(e, frame=caller_frame(2)) # The caller of the generated constructor.
      raise
    plan.call_init(obj, merged)
    return obj


  def allocate(self, cls:type) -> Any:
    obj = cls.__new__(cls)
    if self.dirty:
      plan = plan_for(cls)
      obj._store = DirtyFieldStore()
      obj.hygienic = plan.hygienic
      obj.unhygienic = plan.unhygienic
      obj.clear_dirty() # Setting the exemption sets is itself a write.
    return obj


class SingletonConstructorMethod:
  '''
  Descriptor for a generated singleton constructor.
  The first call constructs the object with the companion `<name>_instance` constructor;
  every call returns that same object.
  Arguments to calls after the first are ignored.
  '''

  def __init__(self, owner:type, name:str, instance_name:str) -> None:
    self.owner = owner
    self.name = name
    self.instance_name = instance_name
    self.instance:Any = None
    self.__doc__ = _generated_doc(_singleton_purpose, owner, name)


  def __repr__(self) -> str:
    return f'<{type(self).__name__} {self.owner.__qualname__}.{self.name}>'


  def __get__(self, obj:Any, cls:type|None=None) -> Callable[...,Any]:
    if cls is None: cls = type(obj)
    target = cls if obj is None else obj

    def singleton_constructor(*args:Any, **kwargs:Any) -> Any:
      if self.instance is None:
        self.instance = getattr(target, self.instance_name)(*args, **kwargs)
      return self.instance

    singleton_constructor.__doc__ = self.__doc__
    return rename(singleton_constructor, self.name, qualname=f'{cls.__qualname__}.{self.name}', module=cls.__module__)


def install_constructor(cls:_C, *names:str, dirty=False) -> _C:
  '''
  Install a constructor on `cls` for each of `names`, defaulting to 'new'.
  If `dirty` is true, objects allocated by the constructors track modifications with a `DirtyFieldStore`.
  Returns `cls`.
  '''
  _check_constructible(cls)
  for name in (names or ('new',)):
    setattr(cls, name, ConstructorMethod(cls, name, dirty=dirty))
  return cls


def install_constructor_with_dirty(cls:_C, *names:str) -> _C:
  'Install dirty-tracking constructors. See `install_constructor`.'
  return install_constructor(cls, *names, dirty=True)


def install_singleton_constructor(cls:_C, *names:str) -> _C:
  '''
  For each of `names`, defaulting to 'new', install a singleton constructor `name`
  and an ordinary constructor `<name>_instance` that it uses to create the single object.
  Each name has its own object, which is never released.
  Returns `cls`.
  '''
  _check_constructible(cls)
  for name in (names or ('new',)):
    instance_name = f'{name}_instance'
    setattr(cls, name, SingletonConstructorMethod(cls, name, instance_name))
    install_constructor(cls, instance_name)
  return cls


def constructor(*names:str, dirty=False) -> Callable[[_C], _C]:
  'Class decorator form of `install_constructor`.'
  return lambda cls: install_constructor(cls, *names, dirty=dirty)


def constructor_with_dirty(*names:str) -> Callable[[_C], _C]:
  'Class decorator form of `install_constructor_with_dirty`.'
  return lambda cls: install_constructor(cls, *names, dirty=True)


def singleton_constructor(*names:str) -> Callable[[_C], _C]:
  'Class decorator form of `install_singleton_constructor`.'
  return lambda cls: install_singleton_constructor(cls, *names)


def _check_constructible(cls:Any) -> None:
  if not (isinstance(cls, type) and issubclass(cls, Constructible)):
    raise TypeError(f'constructors can only be installed on subclasses of Constructible; received {cls!r}')


_constructor_purpose = '''\
Creates and returns a new object.
The constructor accepts named arguments: keyword arguments, a single mapping, or alternating names and values.
For each pair, the named field is initialized by calling its setter with the given value.
When called on an existing object, that object is reinitialized instead.'''

_singleton_purpose = '''\
Creates and returns a new object.
The object is a singleton, so repeated calls to the constructor always return the same object;
arguments to calls after the first are ignored.
Arguments to the first call are handled as for an ordinary generated constructor.'''


def _generated_doc(purpose:str, owner:type, name:str) -> str:
  examples = [
    f'obj = {owner.__qualname__}.{name}()',
    f'obj = {owner.__qualname__}.{name}(**args)',
    f'obj = {owner.__qualname__}.{name}(args)',
  ]
  return purpose + '\n\nExamples:\n' + ''.join(f'  {e}\n' for e in examples)
