# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Per-instance field storage.

Every constructible object keeps its field values in a `FieldStore`.
All writes go through `FieldStore.store`, which is the interception point
that `DirtyFieldStore` overrides to maintain a dirty flag.
'''

from typing import Any, Iterable, Iterator, MutableMapping


class FieldStore(MutableMapping[str,Any]):
  'A plain mapping from field name to value.'

  def __init__(self, fields:Iterable[tuple[str,Any]]=()) -> None:
    self.fields:dict[str,Any] = dict(fields)

  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.fields!r})'

  def __getitem__(self, key:str) -> Any:
    return self.fields[key]

  def __setitem__(self, key:str, value:Any) -> None:
    self.store(key, value)

  def __delitem__(self, key:str) -> None:
    del self.fields[key]

  def __iter__(self) -> Iterator[str]:
    return iter(self.fields)

  def __len__(self) -> int:
    return len(self.fields)

  def store(self, key:str, value:Any) -> None:
    'Write `value` to field `key`.'
    self.fields[key] = value


class DirtyFieldStore(FieldStore):
  '''
  A field store that sets a dirty flag whenever a field is written, except for exempt fields.

  The flag and the two exemption sets live in the store itself, under the keys
  'dirty', 'hygienic' and 'unhygienic', so that the instance's ordinary accessors can reach them.
  Writes to fields in the hygienic set never dirty the store.
  If the unhygienic set is non-empty, it supersedes the hygienic set:
  only writes to its members dirty the store.
  The arrangement is similar to allow/deny rules in a web server configuration.

  The flag and exemption operations defined on this class modify the underlying fields directly,
  so they are never observed as writes.
  '''

  def store(self, key:str, value:Any) -> None:
    if self.size_unhygienic() > 0:
      if self.unhygienic_contains(key): self.set_dirty()
    elif not self.hygienic_contains(key):
      self.set_dirty()
    self.fields[key] = value

  @property
  def is_dirty(self) -> bool:
    return bool(self.fields.get('dirty'))

  def set_dirty(self) -> None:
    self.fields['dirty'] = True

  def clear_dirty(self) -> None:
    self.fields['dirty'] = False

  def hygienic_insert(self, *keys:str) -> None:
    self._exemptions('hygienic').update(keys)

  def hygienic_remove(self, *keys:str) -> None:
    self._exemptions('hygienic').difference_update(keys)

  def hygienic_contains(self, key:str) -> bool:
    return key in self.fields.get('hygienic', ())

  def size_hygienic(self) -> int:
    return len(self.fields.get('hygienic', ()))

  def unhygienic_insert(self, *keys:str) -> None:
    self._exemptions('unhygienic').update(keys)

  def unhygienic_remove(self, *keys:str) -> None:
    self._exemptions('unhygienic').difference_update(keys)

  def unhygienic_contains(self, key:str) -> bool:
    return key in self.fields.get('unhygienic', ())

  def size_unhygienic(self) -> int:
    return len(self.fields.get('unhygienic', ()))

  def _exemptions(self, name:str) -> set[str]:
    s = self.fields.get(name)
    if s is None:
      s = self.fields[name] = set()
    return s
