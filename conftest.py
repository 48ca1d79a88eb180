import pytest
from strata.test_utils import MemoryStore, combine_reducers


@pytest.fixture
def ab_state():
    return {"A": {"id": "A-Id"}, "B": {"id": "B-Id"}}


@pytest.fixture
def ab_store():
    # Reducers ignore actions and always produce a fixed id
    return MemoryStore(
        combine_reducers(
            {
                "A": lambda state, action: {"id": "A-Id"},
                "B": lambda state, action: {"id": "B-Id"},
            }
        )
    )


@pytest.fixture
def chat_state():
    return {
        "chats": {
            "general": {"active": True, "messages": ["hi", "hello"]},
            "random": {"active": False, "messages": []},
        }
    }
