"""Functions as values: delegates, events, lambdas and query expressions."""

from . import delegates, events, lambdas, queries

__all__ = ["delegates", "events", "lambdas", "queries"]
