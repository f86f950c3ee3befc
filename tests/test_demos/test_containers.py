"""
Tests for the Collections and Text Demos

Tests for primer/demos/containers/
"""

import pytest

from primer.demos import run_demo
from primer.demos.containers import dicts, lists, sets, text
from primer.demos.containers.string_builder import StringBuilder


class TestLists:
    def test_remove_all(self):
        items = [1, 60, 2, 70]

        assert lists.remove_all(items, lambda x: x > 55) == 2
        assert items == [1, 2]

    def test_find_helpers(self):
        items = [20, 25, 30, 50]

        assert lists.find_last_index(items, lambda x: x < 30) == 1
        assert lists.find_last_index(items, lambda x: x > 100) == -1
        assert lists.find(items, lambda x: x > 20) == 25
        assert lists.find(items, lambda x: x > 100) is None

    def test_run(self, capsys, fast_config):
        run_demo("lists", fast_config)
        out = capsys.readouterr().out

        assert "[20, 25, 30, 50]" in out
        assert "Sorted descending: [50, 30, 25, 20]" in out
        assert "Count after clear: 0" in out


class TestDicts:
    def test_try_add(self):
        mapping = {1: "One"}

        assert dicts.try_add(mapping, 2, "Two") is True
        assert dicts.try_add(mapping, 1, "Uno") is False
        assert mapping == {1: "One", 2: "Two"}

    def test_run(self, capsys, fast_config):
        run_demo("dicts", fast_config)
        out = capsys.readouterr().out

        assert "2 = Two Updated" in out
        assert "try_add key 5 success: True" in out
        assert "try_add key 1 success: False" in out
        assert "Value for key 10: None" in out


class TestSets:
    def test_format_set_sorted(self):
        assert sets.format_set({9, 4}) == "4 9"

    def test_run(self, capsys, fast_config):
        run_demo("sets", fast_config)
        lines = capsys.readouterr().out.splitlines()

        assert lines[lines.index("After Difference:") + 1] == "2 4"
        assert lines[lines.index("After Symmetric Difference:") + 1] == "4 9"


class TestText:
    @pytest.mark.parametrize("value, empty, blank", [
        (None, True, True),
        ("", True, True),
        ("   ", False, True),
        ("x", False, False),
    ])
    def test_emptiness_checks(self, value, empty, blank):
        assert text.is_null_or_empty(value) is empty
        assert text.is_null_or_whitespace(value) is blank

    def test_run(self, capsys, fast_config):
        run_demo("text", fast_config)
        out = capsys.readouterr().out

        assert "Formatted: Total: 1,234.56" in out
        assert "Percent: 25.6%" in out
        assert "Joined with - : Python-is-fun-to-learn" in out


class TestStringBuilder:
    def test_editing_sequence(self):
        sb = StringBuilder()
        sb.append("Hello").append_line(" World!")
        sb.insert(5, ",").replace("World", "C#").remove(0, 1)

        assert str(sb) == "ello, C#!\n"
        assert len(sb) == 10

    def test_format_and_substring(self):
        sb = StringBuilder()
        sb.append_format("Number: {0}, String: {1}", 42, "test")
        sb.replace("t", "T").append("!").append("ABC")

        assert str(sb) == "Number: 42, STring: TesT!ABC"
        assert sb.substring(7, 6) == " 42, S"

    def test_clear(self):
        sb = StringBuilder("abc")

        assert len(sb.clear()) == 0

    @pytest.mark.parametrize("call", [
        lambda sb: sb.insert(10, "x"),
        lambda sb: sb.remove(2, 5),
        lambda sb: sb.substring(-1, 2),
    ])
    def test_out_of_range(self, call):
        with pytest.raises(IndexError):
            call(StringBuilder("abc"))

    def test_run(self, capsys, fast_config):
        run_demo("string_builder", fast_config)
        out = capsys.readouterr().out

        assert "Length: 10" in out
        assert "Number: 42, STring: TesT!ABC" in out
        assert "Substring (7,6): ' 42, S'" in out
