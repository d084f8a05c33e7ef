import unittest
from tossit.events.Event_Bus import EventBus


class TestEventBus(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.calls = []

    def test_failing_subscriber_does_not_block_others(self):
        def broken(name, payload):
            raise RuntimeError("boom")

        self.bus.subscribe("x", broken)
        self.bus.subscribe("x", lambda name, payload: self.calls.append(payload))
        with self.assertLogs("tossit.events.Event_Bus", level="ERROR"):
            self.bus.publish("x", 42)
        self.assertEqual(self.calls, [42])

    def test_subscribe_is_idempotent_and_unsubscribe_tolerant(self):
        listener = lambda name, payload: self.calls.append(name)
        self.bus.subscribe("y", listener)
        self.bus.subscribe("y", listener)
        self.bus.publish("y", None)
        self.assertEqual(self.calls, ["y"])
        self.bus.unsubscribe("y", listener)
        self.bus.unsubscribe("y", listener)
        self.bus.publish("y", None)
        self.assertEqual(self.calls, ["y"])


if __name__ == '__main__':
    unittest.main()
