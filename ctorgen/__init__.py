# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
ctorgen generates flexible constructors for classes:
inherited defaults, argument munging and ordering, optional dirty tracking, and singletons.
'''

from .accessors import (accessors, boolean_accessors, mk_accessors, mk_boolean_accessors, mk_set_accessors,
  set_accessors)
from .constructor import (Constructible, constructor, constructor_with_dirty, install_constructor,
  install_constructor_with_dirty, install_singleton_constructor, singleton_constructor)
from .exceptions import ConstructorArgsError, CtorgenError, DeclarationError, MissingSetterError
from .inherited import every_hash, every_list, every_set
from .store import DirtyFieldStore, FieldStore
