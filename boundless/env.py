"""The execution environment a contract runs in: storage, ledger, auth, events."""

from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass
from typing import Any


class AuthorizationError(Exception):
    """Raised when an address has not authorized the current call."""


@dataclass(frozen=True)
class Address:
    """An account or contract address."""

    value: str

    @classmethod
    def generate(cls):
        """Return a new address that differs from every other generated one."""
        return cls("G" + uuid.uuid4().hex.upper())

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Event:
    """An event published by a contract."""

    topics: tuple
    data: Any


class Storage:
    """Persistent key-value storage with value semantics.

    Values are copied on the way in and on the way out, so changing an
    object read from storage has no effect until it is written back.
    """

    def __init__(self):
        self._entries: dict[Any, Any] = {}

    def get(self, key, default=None):
        if key not in self._entries:
            return default
        return copy.deepcopy(self._entries[key])

    def set(self, key, value):
        self._entries[key] = copy.deepcopy(value)

    def has(self, key):
        return key in self._entries

    def __len__(self):
        return len(self._entries)


class Env:
    """Holds the state a contract sees while it runs."""

    def __init__(self):
        self.storage = Storage()
        self.timestamp = 0
        self.events: list[Event] = []
        self.wasm_hash: bytes | None = None
        self._all_auths_mocked = False
        self._authorized: set[Address] = set()

    def mock_all_auths(self):
        """Treat every address as having authorized every call."""
        self._all_auths_mocked = True

    def authorize(self, address):
        """Record that ``address`` has authorized the calls that follow."""
        self._authorized.add(address)

    def require_auth(self, address):
        """Raise AuthorizationError unless ``address`` has authorized the call."""
        if not (self._all_auths_mocked or address in self._authorized):
            raise AuthorizationError(f"address {address} has not authorized the call")

    def set_timestamp(self, timestamp):
        if timestamp < 0:
            raise ValueError("ledger timestamp cannot be negative")
        self.timestamp = timestamp

    def publish(self, topics, data):
        """Publish an event and return it."""
        event = Event(tuple(topics), data)
        self.events.append(event)
        return event

    def update_current_contract_wasm(self, wasm_hash):
        """Replace the running contract code by the code with this 32-byte hash."""
        wasm_hash = bytes(wasm_hash)
        if len(wasm_hash) != 32:
            raise ValueError("wasm hash must be exactly 32 bytes")
        self.wasm_hash = wasm_hash