from .store import MemoryStore, combine_reducers, INIT_ACTION

__all__ = ["MemoryStore", "combine_reducers", "INIT_ACTION"]
