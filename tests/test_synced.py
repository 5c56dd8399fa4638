"""Tests for the lock-protected hub variant."""

from __future__ import annotations

import threading
import unittest

from eventhub.synced import SyncedEvents


class SyncedEventsTests(unittest.TestCase):
    """Validate that locking keeps the plain hub semantics."""

    def test_nested_trigger_does_not_deadlock(self) -> None:
        hub = SyncedEvents()
        calls: list[str] = []

        def outer() -> None:
            calls.append("outer")
            hub.off("outer", outer)
            hub.trigger("inner")

        hub.on("outer", outer)
        hub.on("inner", lambda: calls.append("inner"))
        hub.trigger("outer")

        self.assertEqual(calls, ["outer", "inner"])

    def test_concurrent_registration_is_not_lost(self) -> None:
        hub = SyncedEvents()
        counter = {"value": 0}
        counter_lock = threading.Lock()

        def listener() -> None:
            with counter_lock:
                counter["value"] += 1

        def register() -> None:
            for _ in range(100):
                hub.on("tick", listener)

        threads = [threading.Thread(target=register) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(hub.listeners("tick")), 800)
        hub.trigger("tick")
        self.assertEqual(counter["value"], 800)

    def test_trigger_result_matches_plain_hub(self) -> None:
        hub = SyncedEvents()
        hub.on("x", lambda: "ok")
        self.assertEqual(hub.trigger("x"), "ok")
        hub.on("all", lambda event: False)
        self.assertIs(hub.trigger("x"), False)

    def test_mix_to_class_uses_locked_methods(self) -> None:
        class Worker:
            pass

        SyncedEvents.mix_to(Worker)
        self.assertIs(Worker.trigger, SyncedEvents.trigger)

        worker = Worker()
        calls: list[int] = []
        worker.on("done", lambda: calls.append(1)).trigger("done")
        self.assertEqual(calls, [1])


if __name__ == "__main__":
    unittest.main()
