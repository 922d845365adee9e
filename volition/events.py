"""Engine events and a per-frame event bus."""

import enum
from dataclasses import dataclass


class EventId(enum.IntEnum):
    """Kinds of events the engine handles."""

    QUIT = 0
    WINDOW_SIZE_CHANGED = 1
    KEY_DOWN = 2
    MOUSE_MOVE = 3


@dataclass(frozen=True)
class Event:
    """An event; only the fields that belong to its kind are meaningful."""

    id: EventId
    width: int = 0
    height: int = 0
    key: int = 0
    x_relative: int = 0
    y_relative: int = 0
    x_absolute: int = 0
    y_absolute: int = 0


class EventBus:
    """Holds the events gathered for the current frame."""

    def __init__(self):
        self._events = []

    def __iter__(self):
        return iter(self._events)

    def __len__(self):
        return len(self._events)

    def update(self, events):
        """Start a new frame: drop old events and take in the given ones."""
        self.clear()
        for event in events:
            self.push_event(event)

    def clear(self):
        """Drop all events."""
        self._events.clear()

    def push_event(self, event):
        """Append an event to the current frame."""
        self._events.append(event)

    def get_event_by_id(self, event_id):
        """First event of the given kind, or None."""
        return next((e for e in self._events if e.id == event_id), None)

    def get_events_by_id(self, event_id):
        """All events of the given kind, in arrival order."""
        return [e for e in self._events if e.id == event_id]