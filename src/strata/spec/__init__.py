from .protocols import (
    StoreProtocol,
    LeafGetterProtocol,
    AccessorProtocol,
)
from .exceptions import (
    StrataError,
    InvalidSpecShapeError,
    InvalidNodeShapeError,
    DuplicateGetterNameError,
    MissingStateError,
    WildcardUnderflowError,
    WildcardConflictError,
)

__all__ = [
    "StoreProtocol",
    "LeafGetterProtocol",
    "AccessorProtocol",
    "StrataError",
    "InvalidSpecShapeError",
    "InvalidNodeShapeError",
    "DuplicateGetterNameError",
    "MissingStateError",
    "WildcardUnderflowError",
    "WildcardConflictError",
]
