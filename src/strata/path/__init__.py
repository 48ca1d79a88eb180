from .core import GetterPath, P, WILDCARD, Segment
from .resolver import at_path, at_path_with_wildcards

__all__ = [
    "GetterPath",
    "P",
    "WILDCARD",
    "Segment",
    "at_path",
    "at_path_with_wildcards",
]
