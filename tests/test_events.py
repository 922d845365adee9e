from volition.events import Event, EventBus, EventId


def test_event_ids_follow_declaration_order():
    events = [Event(EventId(i)) for i in range(4)]
    bus = EventBus()
    bus.update(events)
    assert [bus.get_event_by_id(event_id) for event_id in EventId] == events
    assert [e.name for e in EventId] == [
        "QUIT",
        "WINDOW_SIZE_CHANGED",
        "KEY_DOWN",
        "MOUSE_MOVE",
    ]


def test_get_event_by_id_returns_first_match():
    bus = EventBus()
    first = Event(EventId.KEY_DOWN, key=10)
    second = Event(EventId.KEY_DOWN, key=20)
    bus.push_event(Event(EventId.QUIT))
    bus.push_event(first)
    bus.push_event(second)
    assert bus.get_event_by_id(EventId.KEY_DOWN) is first


def test_get_event_by_id_missing_is_none():
    bus = EventBus()
    bus.push_event(Event(EventId.QUIT))
    assert bus.get_event_by_id(EventId.MOUSE_MOVE) is None


def test_get_events_by_id_keeps_order():
    bus = EventBus()
    moves = [Event(EventId.MOUSE_MOVE, x_relative=i, x_absolute=i * 2) for i in range(3)]
    bus.update([moves[0], Event(EventId.QUIT), moves[1], moves[2]])
    assert bus.get_events_by_id(EventId.MOUSE_MOVE) == moves
    assert bus.get_events_by_id(EventId.WINDOW_SIZE_CHANGED) == []


def test_update_replaces_previous_frame():
    bus = EventBus()
    bus.update([Event(EventId.QUIT)])
    resize = Event(EventId.WINDOW_SIZE_CHANGED, width=800, height=600)
    bus.update([resize])
    assert len(bus) == 1
    assert bus.get_event_by_id(EventId.QUIT) is None
    assert bus.get_event_by_id(EventId.WINDOW_SIZE_CHANGED).width == 800


def test_clear_empties_bus():
    bus = EventBus()
    bus.push_event(Event(EventId.QUIT))
    bus.clear()
    assert list(bus) == []
    assert bus.get_event_by_id(EventId.QUIT) is None