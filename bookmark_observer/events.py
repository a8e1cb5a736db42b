"""Synchronous observer primitives: senders, receivers and connections."""

from __future__ import annotations

import re
from collections.abc import Hashable
from functools import lru_cache
from typing import Any

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@lru_cache(maxsize=None)
def _handler_name(event_type: type) -> str:
    return "on_" + _CAMEL_BOUNDARY.sub("_", event_type.__name__).lower()


class _Slot:
    __slots__ = ("receiver", "active")

    def __init__(self, receiver: Any) -> None:
        self.receiver = receiver
        self.active = True


class Connection:
    """Handle to one receiver's subscription to a sender.

    A connection made without a sender is never connected; disconnecting
    it, or disconnecting twice, does nothing.
    """

    def __init__(self, sender: EventSender | None = None, slot: _Slot | None = None) -> None:
        self._sender = sender
        self._slot = slot

    def connected(self) -> bool:
        """Return whether the receiver still gets events from the sender."""
        return self._slot is not None and self._slot.active

    def disconnect(self) -> None:
        """Stop delivering events to the receiver."""
        if self._slot is None or not self._slot.active:
            return
        self._slot.active = False
        if self._sender is not None:
            self._sender._remove_slot(self._slot)
        self._sender = None

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.disconnect()


class EventReceiver:
    """Base for objects that take events from senders.

    By default an event of class ``SomeEvent`` is handed to the receiver's
    ``on_some_event`` method when it has one, and ignored otherwise.
    Subclasses may instead override ``receive_event`` directly.
    """

    def receive_event(self, event: Any) -> None:
        """Route the event to its ``on_<event_name>`` handler, if defined."""
        handler = getattr(self, _handler_name(type(event)), None)
        if callable(handler):
            handler(event)

    @property
    def _default_connections(self) -> dict[Hashable, Connection]:
        return self.__dict__.setdefault("_event_default_connections", {})


class EventSender:
    """Delivers events, in connection order, to every connected receiver."""

    def __init__(self) -> None:
        self._slots: list[_Slot] = []

    def connect(self, receiver: Any) -> Connection:
        """Connect a receiver and return the handle of the subscription."""
        if not callable(getattr(receiver, "receive_event", None)):
            raise TypeError(f"{type(receiver).__name__} has no receive_event method")
        slot = _Slot(receiver)
        self._slots.append(slot)
        return Connection(self, slot)

    def send(self, event: Any) -> None:
        """Hand the event to each receiver connected when sending started.

        A receiver disconnected while the event is being delivered does not
        get it.
        """
        for slot in tuple(self._slots):
            if slot.active:
                slot.receiver.receive_event(event)

    def receiver_count(self) -> int:
        """Return the number of live connections."""
        return len(self._slots)

    def _remove_slot(self, slot: _Slot) -> None:
        try:
            self._slots.remove(slot)
        except ValueError:
            pass


def auto_connect(sender: EventSender | None, receiver: EventReceiver, key: Hashable) -> None:
    """Keep one connection of ``receiver`` per ``key``.

    The receiver's previous connection under ``key`` is dropped. With a
    sender, the receiver is connected to it and that connection is kept
    under ``key``; with ``None``, the receiver is left unconnected there.
    """
    if not isinstance(receiver, EventReceiver):
        raise TypeError(f"{type(receiver).__name__} is not an EventReceiver")
    connections = receiver._default_connections
    previous = connections.pop(key, None)
    if previous is not None:
        previous.disconnect()
    if sender is not None:
        connections[key] = sender.connect(receiver)