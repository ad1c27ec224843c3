"""
Tests for ObservableValue.
"""

import pytest
from unittest.mock import MagicMock

from engine.observable import ObservableValue


class TestObservableValue:

    def test_initial_value(self):
        assert ObservableValue(3).value == 3

    def test_set_notifies_subscribers(self):
        value = ObservableValue(0)
        observer = MagicMock()
        value.subscribe(observer)

        value.set(5)

        observer.assert_called_once_with(5)
        assert value.value == 5

    def test_same_value_not_announced(self):
        value = ObservableValue("a")
        observer = MagicMock()
        value.subscribe(observer)

        value.set("a")

        observer.assert_not_called()

    def test_non_distinct_announces_every_write(self):
        value = ObservableValue(None, distinct=False)
        observer = MagicMock()
        value.subscribe(observer)

        value.set("buzz")
        value.set("buzz")

        assert observer.call_count == 2

    def test_subscribers_called_in_order(self):
        value = ObservableValue(0)
        calls = []
        value.subscribe(lambda v: calls.append(("first", v)))
        value.subscribe(lambda v: calls.append(("second", v)))

        value.set(1)

        assert calls == [("first", 1), ("second", 1)]

    def test_unsubscribe(self):
        value = ObservableValue(0)
        observer = value.subscribe(MagicMock())

        value.unsubscribe(observer)
        value.set(1)

        observer.assert_not_called()
        assert value.subscriber_count == 0

    def test_unsubscribe_unknown_is_ignored(self):
        value = ObservableValue(0)

        value.unsubscribe(MagicMock())

        assert value.subscriber_count == 0

    def test_unsubscribe_during_notify(self):
        """A subscriber removing itself does not skip the others."""
        value = ObservableValue(0)
        second = MagicMock()

        def once(v):
            value.unsubscribe(once)

        value.subscribe(once)
        value.subscribe(second)

        value.set(1)
        value.set(2)

        assert [c.args[0] for c in second.call_args_list] == [1, 2]
        assert value.subscriber_count == 1

    def test_nested_write_delivered_after_current_value(self):
        """A subscriber clearing the value does not reorder what later subscribers see."""
        value = ObservableValue(None, distinct=False)
        seen = []

        def clear(v):
            if v is not None:
                value.set(None)

        value.subscribe(clear)
        value.subscribe(seen.append)

        value.set("correct")

        assert seen == ["correct", None]
        assert value.value is None

    def test_nested_write_visible_immediately(self):
        """The stored value updates at once, even while delivery is deferred."""
        value = ObservableValue(0)
        observed = []

        def bump(v):
            if v == 1:
                value.set(2)
                observed.append(value.value)

        value.subscribe(bump)

        value.set(1)

        assert observed == [2]
        assert value.value == 2

    def test_raising_subscriber_does_not_wedge_value(self):
        value = ObservableValue(0)
        failing = value.subscribe(MagicMock(side_effect=RuntimeError("boom")))
        observer = MagicMock()

        with pytest.raises(RuntimeError):
            value.set(1)
        value.unsubscribe(failing)
        value.subscribe(observer)
        value.set(2)

        observer.assert_called_once_with(2)
