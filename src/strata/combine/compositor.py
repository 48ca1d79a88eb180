import logging
from collections.abc import Mapping
from typing import Any, Hashable, Optional

from strata.config import StrataConfig
from strata.path import GetterPath
from strata.spec import (
    DuplicateGetterNameError,
    InvalidNodeShapeError,
    InvalidSpecShapeError,
    WildcardConflictError,
)
from .accessor import Accessor
from .bundle import GetterBundle

log = logging.getLogger(__name__)


def combine_getters(
    getters: Mapping, config: Optional[StrataConfig] = None
) -> GetterBundle:
    """
    Combines a tree of namespaced getters, analogous to combining reducers.

    Expects input of the form:

        {
            "counter": {
                "getCounterValue": lambda counter: counter["value"],
            },
            "chats": {
                "*": {
                    "isChatActive": lambda chat: chat is not None and chat["active"],
                },
            },
        }

    Every leaf getter is wrapped into an Accessor that takes the entire state
    (or a store exposing `get_state()`) and applies the getter to its own
    sub-state. Getters below a wildcard take one extra positional parameter
    per wildcard, placed before the state.

    The result is flat and keyed by the getter name alone, so names must be
    unique across the whole tree. A previous result can be nested into a new
    tree; its accessors are re-qualified under their new position.

    Raises:
        InvalidSpecShapeError: if `getters` is not a mapping.
        InvalidNodeShapeError: if a node is neither a mapping nor a callable.
        DuplicateGetterNameError: if two getters share a name.
    """
    if not isinstance(getters, Mapping):
        raise InvalidSpecShapeError(getters)

    config = config or StrataConfig()
    resolved = GetterBundle()
    _collect(getters, GetterPath(), resolved, config.wildcard)

    log.debug(
        "Combined %d getters (%d bound to wildcards).",
        len(resolved),
        sum(1 for accessor in resolved.values() if accessor.wildcard_count),
    )
    return resolved


def _collect(
    node_map: Mapping, prefix: GetterPath, resolved: GetterBundle, wildcard: str
) -> None:
    for key, node in node_map.items():
        # Subscript keeps the key as a single segment, even if it contains dots
        path = prefix[key]

        if callable(node):
            _add_getter(key, node, path, resolved, wildcard)
        elif isinstance(node, Mapping):
            _collect(node, path, resolved, wildcard)
        else:
            raise InvalidNodeShapeError(str(path), node)


def _add_getter(
    name: Hashable,
    getter: Any,
    path: GetterPath,
    resolved: GetterBundle,
    wildcard: str,
) -> None:
    if isinstance(getter, Accessor):
        # Already combined once: keep its provenance and re-root its namespace
        inner_namespace = GetterPath(
            _translate_marker(segment, getter, wildcard)
            for segment in getter.namespace
        )
        namespace = path.parent / inner_namespace
        qualified_name = path.parent / getter.qualified_name
        log.debug(
            "Re-qualified getter '%s' as '%s'.", getter.qualified_name, qualified_name
        )
        getter = getter.getter
    else:
        namespace = path.parent
        qualified_name = path

    if name in resolved:
        raise DuplicateGetterNameError(
            str(resolved[name].qualified_name), str(qualified_name)
        )

    resolved[name] = Accessor(getter, namespace, qualified_name, wildcard=wildcard)


def _translate_marker(segment: Hashable, getter: Accessor, wildcard: str) -> Hashable:
    if segment == getter.wildcard:
        return wildcard
    # A literal key of the inner tree would turn into a wildcard here
    if segment == wildcard:
        raise WildcardConflictError(str(getter.qualified_name), wildcard)
    return segment


compose = combine_getters
