import pytest

from bookmark_observer.events import (
    Connection,
    EventReceiver,
    EventSender,
    auto_connect,
)


class Recorder(EventReceiver):
    def __init__(self, log=None, tag=None):
        self.events = []
        self.log = log
        self.tag = tag

    def receive_event(self, event):
        self.events.append(event)
        if self.log is not None:
            self.log.append(self.tag)


def test_send_reaches_connected_receiver():
    sender = EventSender()
    receiver = Recorder()
    sender.connect(receiver)
    sender.send("first")
    sender.send("second")
    assert receiver.events == ["first", "second"]


def test_receivers_called_in_connection_order():
    sender = EventSender()
    log = []
    sender.connect(Recorder(log, "a"))
    sender.connect(Recorder(log, "b"))
    sender.connect(Recorder(log, "c"))
    sender.send(object())
    assert log == ["a", "b", "c"]


def test_disconnect_stops_delivery():
    sender = EventSender()
    receiver = Recorder()
    connection = sender.connect(receiver)
    assert connection.connected()
    assert sender.receiver_count() == 1
    connection.disconnect()
    sender.send("ignored")
    assert receiver.events == []
    assert not connection.connected()
    assert sender.receiver_count() == 0


def test_disconnect_twice_is_harmless():
    sender = EventSender()
    first = sender.connect(Recorder())
    second = sender.connect(Recorder())
    first.disconnect()
    first.disconnect()
    assert sender.receiver_count() == 1
    assert second.connected()


def test_empty_connection_is_not_connected():
    connection = Connection()
    connection.disconnect()
    assert connection.connected() is False


def test_connection_context_manager_disconnects():
    sender = EventSender()
    receiver = Recorder()
    with sender.connect(receiver) as connection:
        sender.send(1)
    sender.send(2)
    assert receiver.events == [1]
    assert not connection.connected()


def test_disconnect_during_send_skips_later_receiver():
    sender = EventSender()
    late = Recorder()
    holder = {}

    class Cutter(EventReceiver):
        def receive_event(self, event):
            holder["late"].disconnect()

    sender.connect(Cutter())
    holder["late"] = sender.connect(late)
    sender.send("event")
    assert late.events == []
    assert sender.receiver_count() == 1


def test_connect_rejects_object_without_receive_event():
    with pytest.raises(TypeError):
        EventSender().connect(object())


def test_auto_connect_replaces_previous_connection():
    first = EventSender()
    second = EventSender()
    receiver = Recorder()
    auto_connect(first, receiver, "key")
    auto_connect(second, receiver, "key")
    first.send("from first")
    second.send("from second")
    assert receiver.events == ["from second"]
    assert first.receiver_count() == 0
    assert second.receiver_count() == 1


def test_auto_connect_none_disconnects():
    sender = EventSender()
    receiver = Recorder()
    auto_connect(sender, receiver, "key")
    auto_connect(None, receiver, "key")
    sender.send("ignored")
    assert receiver.events == []
    assert sender.receiver_count() == 0


def test_auto_connect_keys_are_independent():
    node_sender = EventSender()
    url_sender = EventSender()
    receiver = Recorder()
    auto_connect(node_sender, receiver, "node")
    auto_connect(url_sender, receiver, "url")
    auto_connect(None, receiver, "node")
    assert node_sender.receiver_count() == 0
    assert url_sender.receiver_count() == 1


def test_auto_connect_requires_event_receiver():
    class Plain:
        def receive_event(self, event):
            pass

    with pytest.raises(TypeError):
        auto_connect(EventSender(), Plain(), "key")