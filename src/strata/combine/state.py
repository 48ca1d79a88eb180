from dataclasses import dataclass
from typing import Any, Callable

from strata.spec import StoreProtocol


@dataclass(frozen=True)
class RawState:
    value: Any


@dataclass(frozen=True)
class StoreState:
    get_state: Callable[[], Any]


def resolve_state(store_or_state: Any) -> Any:
    # Explicit wrappers win over probing
    if isinstance(store_or_state, RawState):
        return store_or_state.value
    if isinstance(store_or_state, StoreState):
        return store_or_state.get_state()

    if isinstance(store_or_state, StoreProtocol) and callable(
        getattr(store_or_state, "get_state", None)
    ):
        return store_or_state.get_state()

    return store_or_state
