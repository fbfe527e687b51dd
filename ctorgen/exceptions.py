# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes for generated constructors.
'''

from typing import Any


class CtorgenError(Exception):
  'Base class for errors raised by ctorgen.'


class ConstructorArgsError(CtorgenError, TypeError):
  '''
  Raised when the default argument munging rule receives positional arguments
  that are neither a single mapping nor alternating name/value pairs.
  '''


class DeclarationError(CtorgenError, TypeError):
  'Raised when a class-level declaration such as `DEFAULTS` has the wrong shape.'


class MissingSetterError(CtorgenError, AttributeError):
  '''
  Raised when a constructor argument names a field that has no setter on the runtime class.
  Since it arises from an attribute lookup, it subclasses AttributeError.
  '''
  def __init__(self, *, cls:type, name:Any) -> None:
    self.cls = cls
    self.name = name
    self.reported = False # Whether the diagnostic has been printed.
    super().__init__(f'{cls.__qualname__}: no setter method for [{name}]')
