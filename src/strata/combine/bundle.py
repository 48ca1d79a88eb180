from typing import Dict, Hashable

from strata.path import GetterPath
from .accessor import Accessor


class GetterBundle(Dict[Hashable, Accessor]):
    """
    The flat result of a composition: terminal getter name -> Accessor.

    Entries are also reachable as attributes, so `bundle.getCounterValue(store)`
    reads like a module of plain functions.

    Attribute access only falls back to the entries: a getter named like a
    dict method or attribute of the bundle (`items`, `get`, `keys`, `copy`,
    `qualified_names`, ...) must be looked up with `bundle["items"]`.
    """

    def __getattr__(self, name: str) -> Accessor:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    @property
    def qualified_names(self) -> Dict[Hashable, GetterPath]:
        return {name: accessor.qualified_name for name, accessor in self.items()}
