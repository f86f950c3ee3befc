"""
Tests for the Basics Demos

Tests for primer/demos/basics/
"""

import pytest

from primer.demos import run_demo
from primer.demos.basics import arrays, exception_handling, maths, methods, randoms, strings, type_casting


class TestArrays:
    def test_helpers(self):
        assert arrays.generate_array(5) == [1, 2, 3, 4, 5]
        assert arrays.sum_array([1, 2, 3, 4, 5]) == 15
        assert arrays.format_array([10, 20]) == "10 20"

    def test_run(self, capsys, fast_config):
        run_demo("arrays", fast_config)
        out = capsys.readouterr().out

        assert "Sum of Array: 15" in out
        assert "Index of 30: 2" in out
        assert "Jagged Array:\n1 2 3\n4 5\n" in out


class TestMaths:
    @pytest.mark.parametrize("value, expected", [(-7, -1), (0, 0), (3.5, 1)])
    def test_sign(self, value, expected):
        assert maths.sign(value) == expected

    def test_sign_of_nan(self):
        with pytest.raises(ValueError):
            maths.sign(float("nan"))

    def test_run(self, capsys, fast_config):
        run_demo("maths", fast_config)
        lines = capsys.readouterr().out.splitlines()

        assert lines[:5] == ["20", "-1", "30", "15", "8"]
        assert "2 4" in lines


class TestMethods:
    def test_multiply_dispatches_on_type(self):
        assert methods.multiply(4, 5) == 20
        assert methods.multiply(2.5, 3.5) == 8.75
        assert methods.multiply(0.1, 3.0) == 0.1 * 3.0

    def test_multiply_unsupported(self):
        with pytest.raises(TypeError):
            methods.multiply("a", "b")

    def test_display_user_defaults(self, capsys):
        assert methods.display_user("Alice") == "Name: Alice, Age: 18"
        assert methods.display_user(age=30, name="Charlie") == "Name: Charlie, Age: 30"

    def test_helpers(self):
        assert methods.min_max(7, 3, 9) == (3, 9)
        assert methods.factorial(5) == 120
        assert methods.factorial(0) == 1
        assert methods.cube(3) == 27
        assert methods.double_it(5) == 10

    def test_run(self, capsys, fast_config):
        run_demo("methods", fast_config)
        out = capsys.readouterr().out

        assert "Factorial of 5: 120" in out
        assert "Multiply float: 8.75" in out
        assert "10 20 30 40 50" in out


class TestRandoms:
    def test_format_bytes(self):
        assert randoms.format_bytes(bytes([10, 255, 16])) == "0A-FF-10"

    def test_seeded_run_is_repeatable(self, capsys, fast_config):
        run_demo("randoms", fast_config)
        first = capsys.readouterr().out
        run_demo("randoms", fast_config)
        second = capsys.readouterr().out

        assert first == second
        assert "Random bytes:" in first


class TestStrings:
    def test_compare(self):
        assert strings.compare("Hello", "hello world") == -1
        assert strings.compare("b", "a") == 1
        assert strings.compare("a", "a") == 0

    def test_insert(self):
        assert strings.insert("hello world", 0, "inserint") == "inserinthello world"

    def test_run(self, capsys, fast_config):
        run_demo("strings", fast_config)
        lines = capsys.readouterr().out.splitlines()

        assert lines[0] == "Hello World"
        assert "Hello Python" in lines


class TestTypeCasting:
    @pytest.mark.parametrize("text, expected", [
        ("true", True), ("  TRUE ", True), ("False", False), ("fAlSe", False),
    ])
    def test_to_bool(self, text, expected):
        assert type_casting.to_bool(text) is expected

    @pytest.mark.parametrize("text", ["maybe", "yes", "no", "1", "0", ""])
    def test_to_bool_rejects_other_text(self, text):
        with pytest.raises(ValueError):
            type_casting.to_bool(text)

    def test_run(self, capsys, fast_config):
        run_demo("type_casting", fast_config)
        out = capsys.readouterr().out

        assert "True bool" in out
        assert "56.79" in out
        assert "Conversion failed:" in out


class TestExceptionHandling:
    def test_validate_age(self, capsys):
        with pytest.raises(ValueError):
            exception_handling.validate_age(15)
        exception_handling.validate_age(21)
        assert "Age is valid." in capsys.readouterr().out

    def test_register_member_chains(self):
        with pytest.raises(exception_handling.AgeValidationError) as exc_info:
            exception_handling.register_member(12)

        assert exc_info.value.age == 12
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_run(self, capsys, fast_config):
        run_demo("exception_handling", fast_config)
        out = capsys.readouterr().out

        assert "Caught Exception: division by zero" in out
        assert "Finally block always runs." in out
        assert "Could not parse None: TypeError" in out
