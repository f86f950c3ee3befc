"""Collections and text: list, dict, set, str and a string builder."""

from . import lists, dicts, sets, text, string_builder

__all__ = ["lists", "dicts", "sets", "text", "string_builder"]
