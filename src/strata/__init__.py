from .spec import (
    StrataError,
    InvalidSpecShapeError,
    InvalidNodeShapeError,
    DuplicateGetterNameError,
    MissingStateError,
    WildcardUnderflowError,
    WildcardConflictError,
    StoreProtocol,
)
from .path import GetterPath, P, WILDCARD, at_path, at_path_with_wildcards
from .combine import (
    Accessor,
    GetterBundle,
    RawState,
    StoreState,
    combine_getters,
    compose,
    resolve_state,
)
from .config import StrataConfig, load_config_from_path

__all__ = [
    "StrataError",
    "InvalidSpecShapeError",
    "InvalidNodeShapeError",
    "DuplicateGetterNameError",
    "MissingStateError",
    "WildcardUnderflowError",
    "WildcardConflictError",
    "StoreProtocol",
    "GetterPath",
    "P",
    "WILDCARD",
    "at_path",
    "at_path_with_wildcards",
    "Accessor",
    "GetterBundle",
    "RawState",
    "StoreState",
    "combine_getters",
    "compose",
    "resolve_state",
    "StrataConfig",
    "load_config_from_path",
]
