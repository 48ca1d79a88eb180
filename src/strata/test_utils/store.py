from typing import Any, Callable, Dict, Mapping, Optional

Action = Dict[str, Any]
Reducer = Callable[[Optional[Any], Action], Any]

INIT_ACTION: Action = {"type": "@@strata/INIT"}


def combine_reducers(reducers: Mapping[str, Reducer]) -> Reducer:
    def reducer(state: Optional[Dict[str, Any]], action: Action) -> Dict[str, Any]:
        state = state or {}
        return {key: sub(state.get(key), action) for key, sub in reducers.items()}

    return reducer


class MemoryStore:
    """
    A minimal reducer-driven store exposing `get_state()`.

    Stands in for the host application's state container in tests; it is not
    part of the getter machinery, which only ever reads from a store.
    """

    def __init__(self, reducer: Reducer, initial_state: Any = None):
        self._reducer = reducer
        self._state = reducer(initial_state, INIT_ACTION)
        self.get_state_calls = 0

    def get_state(self) -> Any:
        self.get_state_calls += 1
        return self._state

    def dispatch(self, action: Action) -> Action:
        self._state = self._reducer(self._state, action)
        return action
