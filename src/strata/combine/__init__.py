from .state import RawState, StoreState, resolve_state
from .accessor import Accessor
from .bundle import GetterBundle
from .compositor import combine_getters, compose

__all__ = [
    "RawState",
    "StoreState",
    "resolve_state",
    "Accessor",
    "GetterBundle",
    "combine_getters",
    "compose",
]
