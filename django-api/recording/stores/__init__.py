from recording.stores.interfaces import EventStore, SessionStore
from recording.stores.memory_store import MemoryEventStore, MemorySessionStore

__all__ = [
    "EventStore",
    "SessionStore",
    "MemoryEventStore",
    "MemorySessionStore",
]
