"""
Tests for the Demo Registry

Tests for primer/demos/registry.py and primer/demos/pacing.py
"""

import random
import time

import pytest

from primer.core.config import DemoConfig
from primer.core.constants import DemoCategory
from primer.core.exceptions import (
    DemoExecutionError,
    DemoNotFoundError,
    DuplicateDemoError,
    InvalidConfigError,
)
from primer.demos import (
    DemoEntry,
    capture_demo,
    get_demo,
    list_demos,
    register_demo,
    run_all,
    run_demo,
)
from primer.demos import pacing, registry

EXPECTED_DEMOS = {
    DemoCategory.BASICS: {
        "arrays", "maths", "methods", "randoms", "strings", "type_casting", "exception_handling",
    },
    DemoCategory.CONTAINERS: {"lists", "dicts", "sets", "text", "string_builder"},
    DemoCategory.FUNCTIONAL: {"delegates", "events", "lambdas", "queries"},
    DemoCategory.OOP: {
        "abstraction", "classes", "generics", "inheritance", "interfaces", "polymorphism", "structs",
    },
    DemoCategory.CONCURRENCY: {"async_await", "table_sync", "threads"},
    DemoCategory.TIMEKEEPING: {"datetimes", "timespans"},
}


@pytest.fixture
def scratch_demo():
    """Register a throwaway demo and remove it afterwards."""
    names = []

    def _register(name, func, category=DemoCategory.BASICS):
        register_demo(name, name.title(), category)(func)
        names.append(name)

    yield _register
    for name in names:
        registry._registry.pop(name, None)


class TestCatalogue:
    """Tests for the registered catalogue."""

    def test_every_demo_registered(self):
        registered = {entry.name for entry in list_demos()}
        expected = set().union(*EXPECTED_DEMOS.values())

        assert registered == expected

    @pytest.mark.parametrize("category", list(DemoCategory))
    def test_category_filter(self, category):
        names = {entry.name for entry in list_demos(category)}

        assert names == EXPECTED_DEMOS[category]

    def test_listing_order(self):
        entries = list_demos()
        order = list(DemoCategory)
        keys = [(order.index(entry.category), entry.name) for entry in entries]

        assert keys == sorted(keys)

    def test_summary_defaults_to_docstring(self):
        assert get_demo("arrays").summary == "Lists used as arrays: indexing, sorting, nesting."

    def test_to_dict(self):
        data = get_demo("table_sync").to_dict()

        assert data["name"] == "table_sync"
        assert data["category"] == "concurrency"
        assert data["category_name"] == "Threads & Async"


class TestLookup:
    """Tests for get_demo and name normalisation."""

    def test_lookup_returns_entry(self):
        entry = get_demo("sets")

        assert isinstance(entry, DemoEntry)
        assert callable(entry.run)

    def test_lookup_is_case_insensitive(self):
        assert get_demo("Arrays").name == "arrays"

    def test_dash_matches_underscore(self):
        assert get_demo("string-builder").name == "string_builder"

    def test_unknown_demo(self):
        with pytest.raises(DemoNotFoundError) as exc_info:
            get_demo("does_not_exist")
        assert "arrays" in exc_info.value.details["available"]


class TestRegistration:
    """Tests for register_demo."""

    def test_duplicate_name_rejected(self):
        with pytest.raises(DuplicateDemoError):
            register_demo("arrays", "Again", DemoCategory.BASICS)(lambda: None)

    def test_decorator_returns_function(self, scratch_demo):
        def sample():
            """Sample demo."""
            print("sample ran")

        scratch_demo("scratch_sample", sample)

        assert get_demo("scratch_sample").run is sample
        assert get_demo("scratch_sample").summary == "Sample demo."


class TestRunning:
    """Tests for run_demo, run_all and capture_demo."""

    def test_run_demo_prints(self, capsys, fast_config):
        entry = run_demo("maths", fast_config)

        assert entry.name == "maths"
        assert "20" in capsys.readouterr().out.splitlines()

    def test_run_unknown_demo(self, fast_config):
        with pytest.raises(DemoNotFoundError):
            run_demo("missing", fast_config)

    def test_failure_is_wrapped(self, scratch_demo, fast_config):
        def broken():
            raise ZeroDivisionError("division by zero")

        scratch_demo("scratch_broken", broken)

        with pytest.raises(DemoExecutionError) as exc_info:
            run_demo("scratch_broken", fast_config)
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)
        assert exc_info.value.details["name"] == "scratch_broken"

    def test_run_all_category(self, capsys, fast_config):
        names = run_all(fast_config, DemoCategory.TIMEKEEPING)
        out = capsys.readouterr().out

        assert names == ["datetimes", "timespans"]
        assert "=" * 60 in out
        assert "[timespans]" in out

    def test_capture_demo(self, capsys, fast_config):
        output = capture_demo("sets", fast_config)

        assert "After Symmetric Difference:\n4 9\n" in output
        assert capsys.readouterr().out == ""


class TestPacing:
    """Tests for the pacing module."""

    def test_zero_scale_skips_sleep(self):
        pacing.configure(DemoConfig(time_scale=0))
        start = time.perf_counter()
        pacing.sleep(5)

        assert time.perf_counter() - start < 1

    def test_scaled(self):
        pacing.configure(DemoConfig(time_scale=0.5))

        assert pacing.scaled(4) == 2
        assert pacing.time_scale() == 0.5

    def test_seeded_rng_is_repeatable(self):
        pacing.configure(DemoConfig(seed=5))
        first = [pacing.rng().random() for _ in range(3)]
        pacing.configure(DemoConfig(seed=5))
        second = [pacing.rng().random() for _ in range(3)]

        assert first == second
        assert first[0] == random.Random(5).random()

    def test_negative_scale_rejected(self):
        with pytest.raises(InvalidConfigError):
            pacing.configure(DemoConfig(time_scale=-1))
