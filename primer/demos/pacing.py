"""
Demo pacing.

Threading and async demos sleep so their interleaving is visible on a
console. Every sleep goes through this module so a single time scale can
speed them up (tests run with a scale of 0).
"""

import asyncio
import random
import threading
import time
from typing import Optional

from primer.core.config import DemoConfig

_time_scale: float = 1.0
_rng: random.Random = random.Random()


def configure(config: Optional[DemoConfig] = None) -> None:
    """Apply a DemoConfig; None restores real-time pacing and an unseeded RNG."""
    global _time_scale, _rng
    config = config or DemoConfig()
    config.validate()
    _time_scale = config.time_scale
    _rng = random.Random(config.seed)


def time_scale() -> float:
    return _time_scale


def scaled(seconds: float) -> float:
    return seconds * _time_scale


def sleep(seconds: float) -> None:
    time.sleep(scaled(seconds))


async def async_sleep(seconds: float) -> None:
    await asyncio.sleep(scaled(seconds))


def wait(event: threading.Event, seconds: float) -> bool:
    """Wait on an event for a scaled timeout. True if the event was set."""
    return event.wait(scaled(seconds))


def rng() -> random.Random:
    return _rng
