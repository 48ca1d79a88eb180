from typing import Any, Callable

from strata.path import GetterPath, WILDCARD, at_path_with_wildcards
from strata.spec import AccessorProtocol, MissingStateError, WildcardUnderflowError
from .state import resolve_state


class Accessor(AccessorProtocol):
    __slots__ = ("_getter", "_namespace", "_qualified_name", "_wildcard", "_arity")

    def __init__(
        self,
        getter: Callable[..., Any],
        namespace: GetterPath,
        qualified_name: GetterPath,
        wildcard: str = WILDCARD,
    ):
        self._getter = getter
        # Path of the sub-state, i.e. the qualified path without the leaf
        self._namespace = namespace
        self._qualified_name = qualified_name
        self._wildcard = wildcard
        self._arity = namespace.count(wildcard)

    @property
    def getter(self) -> Callable[..., Any]:
        return self._getter

    @property
    def namespace(self) -> GetterPath:
        return self._namespace

    @property
    def qualified_name(self) -> GetterPath:
        return self._qualified_name

    @property
    def wildcard(self) -> str:
        return self._wildcard

    @property
    def wildcard_count(self) -> int:
        return self._arity

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not args:
            raise MissingStateError(str(self._qualified_name))

        *params, store = args
        state = resolve_state(store)

        if len(params) < self._arity:
            raise WildcardUnderflowError(
                "Less parameters than wildcard segments supplied.",
                expected=self._arity,
                supplied=len(params),
            )

        # The trailing params are wildcard bindings, the rest pass through
        split = len(params) - self._arity
        passthrough, bindings = params[:split], params[split:]

        sub_state = at_path_with_wildcards(
            self._namespace, state, bindings, wildcard=self._wildcard
        )
        return self._getter(*passthrough, sub_state, **kwargs)

    def __repr__(self) -> str:
        return f"<Accessor: '{self._qualified_name}'>"
