from types import SimpleNamespace

import pytest
from strata.path import P, at_path, at_path_with_wildcards
from strata.spec import WildcardUnderflowError


def test_at_path_follows_mappings():
    state = {"a": {"b": {"c": 42}}}

    assert at_path(["a", "b", "c"], state) == 42
    assert at_path(P.a.b, state) == {"c": 42}
    assert at_path([], state) is state


def test_at_path_returns_default_on_absence():
    state = {"a": {"b": None}}

    assert at_path(["x"], state) is None
    assert at_path(["a", "missing", "c"], state) is None
    # None in the middle of the path counts as absent, not as an error
    assert at_path(["a", "b", "c"], state) is None
    assert at_path(["a"], None) is None
    assert at_path(["x"], state, default="absent") == "absent"


def test_at_path_keeps_stored_falsy_values():
    state = {"a": {"zero": 0, "empty": {}}}

    assert at_path(["a", "zero"], state) == 0
    assert at_path(["a", "empty"], state) == {}


def test_at_path_indexes_sequences_and_objects():
    state = SimpleNamespace(items=[{"id": "first"}, {"id": "second"}])

    assert at_path(P.items[1].id, state) == "second"
    assert at_path(P.items[5].id, state) is None
    assert at_path(["items", "0"], state) is None
    assert at_path(["missing"], state) is None
    # Strings are values, not containers
    assert at_path([0], "text") is None


def test_wildcards_bind_from_the_end():
    state = {"outer": {"inner": {"id": "v"}}}

    assert at_path_with_wildcards(["*", "*", "id"], state, ["inner", "outer"]) == "v"
    assert at_path_with_wildcards(["*", "*"], state, ["outer", "inner"]) is None


def test_wildcards_do_not_consume_caller_params():
    params = ["inner", "outer"]

    at_path_with_wildcards(["*", "*"], {}, params)

    assert params == ["inner", "outer"]


def test_wildcard_underflow_raises():
    with pytest.raises(WildcardUnderflowError, match="more wildcards than parameters"):
        at_path_with_wildcards(["*", "*"], {"a": {"b": 1}}, ["a"])


def test_absence_short_circuits_before_underflow():
    # The first segment is missing, so the second wildcard is never reached
    assert at_path_with_wildcards(["*", "*"], {}, ["x"]) is None


def test_custom_wildcard_marker():
    state = {"chats": {"general": {"active": True}}}

    assert at_path_with_wildcards(
        ["chats", "$", "active"], state, ["general"], wildcard="$"
    )
    # The default marker is an ordinary key once another marker is configured
    assert at_path_with_wildcards(["*"], {"*": 1}, [], wildcard="$") == 1


def test_unhashable_keys_are_absent():
    state = {"chats": {"general": 1}}

    assert at_path(["chats", ["general"]], state) is None
    assert at_path_with_wildcards(["chats", "*"], state, [["general"]]) is None


def test_scalars_are_not_navigated():
    state = {"A": "hello", "n": 3, "raw": b"bytes", "flag": True}

    # Method names of builtin values are not state keys
    assert at_path(["A", "upper"], state) is None
    assert at_path(["n", "real"], state) is None
    assert at_path(["raw", "decode"], state) is None
    assert at_path(["flag", "conjugate"], state) is None
