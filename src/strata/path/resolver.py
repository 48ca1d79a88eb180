from collections.abc import Mapping, Sequence
from numbers import Number
from typing import Any, Iterable, List, Optional

from strata.spec import WildcardUnderflowError
from .core import WILDCARD, Segment

_MISSING = object()

_SCALARS = (str, bytes, bytearray, Number)


def _step(obj: Any, segment: Segment) -> Any:
    if obj is None:
        return _MISSING

    if isinstance(obj, Mapping):
        try:
            present = segment in obj
        except TypeError:
            # An unhashable key can never be present
            return _MISSING
        return obj[segment] if present else _MISSING

    # Scalars are leaves; their methods are not part of the state
    if isinstance(obj, _SCALARS):
        return _MISSING

    if isinstance(obj, Sequence):
        if isinstance(segment, int) and -len(obj) <= segment < len(obj):
            return obj[segment]
        return _MISSING

    # Plain objects (dataclasses, namespaces, ...) are navigated by attribute
    if isinstance(segment, str) and hasattr(obj, segment):
        return getattr(obj, segment)
    return _MISSING


def at_path(path: Iterable[Segment], obj: Any, default: Any = None) -> Any:
    """
    Follows `path` into `obj` and returns the value found there.

    Returns `default` as soon as an intermediate value is None or lacks the
    next segment. Absence never raises.
    """
    for segment in path:
        obj = _step(obj, segment)
        if obj is _MISSING:
            return default
    return obj


def at_path_with_wildcards(
    path: Iterable[Segment],
    obj: Any,
    params: Optional[Iterable[Any]] = None,
    default: Any = None,
    wildcard: str = WILDCARD,
) -> Any:
    """
    Like `at_path`, but wildcard segments are replaced by bindings from `params`.

    Bindings are taken from the end of `params` as wildcards are met from the
    root down, so the last binding fills the outermost wildcard. `params` is
    not modified.

    Raises:
        WildcardUnderflowError: if a wildcard is met with no bindings left.
    """
    bindings: List[Any] = list(params or ())
    supplied = len(bindings)
    segments = list(path)

    for segment in segments:
        if segment == wildcard:
            if not bindings:
                raise WildcardUnderflowError(
                    "Encountered more wildcards than parameters.",
                    expected=segments.count(wildcard),
                    supplied=supplied,
                )
            segment = bindings.pop()
        obj = _step(obj, segment)
        if obj is _MISSING:
            return default
    return obj
