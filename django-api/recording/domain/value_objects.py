"""Domain primitives that enforce validity at creation time."""

import itertools
import re
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Self

_OBJECT_ID_PATTERN = re.compile(r"[0-9a-f]{24}")

_PROCESS_TAG = secrets.token_hex(5)
_counter = itertools.count(secrets.randbelow(0xFFFFFF))
_counter_lock = threading.Lock()


def new_object_id() -> str:
    """Return a fresh ObjectId-style hex string.

    Layout: 4 byte seconds timestamp, 5 byte per-process tag, 3 byte counter,
    so ids minted by one process sort in creation order.
    """
    with _counter_lock:
        count = next(_counter) & 0xFFFFFF
    return f"{int(time.time()):08x}{_PROCESS_TAG}{count:06x}"


@dataclass(frozen=True)
class _ObjectId:
    """24 character lowercase hex identifier, as issued by document stores."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _OBJECT_ID_PATTERN.fullmatch(self.value):
            raise ValueError(f"{type(self).__name__} must be a 24 character hex string")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not isinstance(value, str):
            raise ValueError(f"{cls.__name__} must be a string")
        return cls(value=value.strip().lower())

    @classmethod
    def generate(cls) -> Self:
        return cls(value=new_object_id())


@dataclass(frozen=True)
class SessionId(_ObjectId):
    """Unique identifier for a Session."""


@dataclass(frozen=True)
class EventId(_ObjectId):
    """Unique identifier for an Event."""


@dataclass(frozen=True)
class ClientId(_ObjectId):
    """Identifier of the client (tenant) owning a session."""


@dataclass(frozen=True)
class VisitorId(_ObjectId):
    """Identifier of the visitor a session tracks."""


@dataclass(frozen=True)
class Duration:
    """Non-negative number of whole seconds."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Duration must be an integer number of seconds")
        if self.value < 0:
            raise ValueError("Duration cannot be negative")


@dataclass(frozen=True)
class Page:
    """Offset/limit window over an ordered result set."""

    offset: int
    limit: int

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("Page offset cannot be negative")
        if self.limit < 0:
            raise ValueError("Page limit cannot be negative")

    @property
    def end(self) -> int:
        return self.offset + self.limit
