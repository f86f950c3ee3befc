"""
Tests for the Functional Demos

Tests for primer/demos/functional/
"""

import pytest

from primer.demos import run_demo
from primer.demos.functional import lambdas, queries
from primer.demos.functional.delegates import MulticastDelegate
from primer.demos.functional.events import EventHook, Notifier


class TestMulticastDelegate:
    """Tests for the invocation list."""

    def test_calls_in_order(self):
        calls = []
        delegate = MulticastDelegate(lambda: calls.append("a"))
        delegate += lambda: calls.append("b")

        delegate()

        assert calls == ["a", "b"]

    def test_returns_last_result(self):
        delegate = MulticastDelegate(lambda x: x + 1, lambda x: x * 10)

        assert delegate(2) == 20

    def test_remove_last_occurrence(self):
        def first():
            pass

        def second():
            pass

        delegate = MulticastDelegate(first, second, first)
        delegate -= first

        assert delegate.invocation_list == (first, second)

    def test_remove_missing_is_noop(self):
        def only():
            pass

        delegate = MulticastDelegate(only)
        delegate -= print

        assert len(delegate) == 1

    def test_combine_and_remove(self):
        def a():
            pass

        def b():
            pass

        combined = MulticastDelegate.combine(MulticastDelegate(a), b)
        reduced = MulticastDelegate.remove(combined, b)

        assert combined.invocation_list == (a, b)
        assert reduced.invocation_list == (a,)

    def test_empty_delegate_is_falsy(self):
        assert not MulticastDelegate()

    def test_run(self, capsys, fast_config):
        run_demo("delegates", fast_config)
        out = capsys.readouterr().out

        assert "Greet : Ashok\nGoodbye, Ashok\nWelcome, Ashok\n" in out
        assert "Number of functions attached: 2" in out


class TestEventHook:
    """Tests for subscribe, unsubscribe and fire."""

    def test_fire_reaches_subscribers(self):
        hook = EventHook("changed")
        received = []
        hook += received.append

        assert hook.fire("ping") == 1
        assert received == ["ping"]

    def test_fire_without_subscribers(self):
        assert EventHook().fire() == 0

    def test_unsubscribe_unknown_is_noop(self):
        hook = EventHook()
        hook -= print

        assert len(hook) == 0

    def test_non_callable_rejected(self):
        hook = EventHook()

        with pytest.raises(TypeError):
            hook += "not a function"

    def test_notifier(self, capsys):
        notifier = Notifier()
        received = []
        notifier.on_notify += received.append

        notifier.trigger_event()

        assert received == ["Event has been triggered."]

    def test_run(self, capsys, fast_config):
        run_demo("events", fast_config)
        out = capsys.readouterr().out

        assert "Event received: Event has been triggered." in out
        assert "Listener received: Event has been triggered." in out


class TestLambdas:
    def test_multiplier(self):
        assert lambdas.multiplier(3)(10) == 30

    def test_power(self):
        assert lambdas.power(2)(5) == 25
        assert lambdas.power(3)(2) == 8
        assert lambdas.power(0)(7) == 1

    def test_run(self, capsys, fast_config):
        run_demo("lambdas", fast_config)
        out = capsys.readouterr().out

        assert "Multiply 10 by changed factor (10): 100" in out
        assert "Late binding: [2, 2, 2]" in out
        assert "Frozen with default: [0, 1, 2]" in out


class TestQueries:
    def test_distinct_keeps_first_order(self):
        assert queries.distinct([3, 1, 3, 2, 1]) == [3, 1, 2]

    def test_page(self):
        assert queries.page(queries.NUMBERS, 2, 3) == [3, 4, 5]

    def test_run(self, capsys, fast_config):
        run_demo("queries", fast_config)
        out = capsys.readouterr().out

        assert "Where > 5: [6, 7, 8, 9, 10, 324, 534]" in out
        assert "Any negative: True" in out
        assert "Joined: [('csharp', 9), ('java', 7), ('LINQ', 8)]" in out
