"""
Demo Registry

Tracks every demo in the catalogue and runs them by name.

Usage:
    from primer.demos import register_demo, run_demo

    @register_demo("arrays", "Arrays", DemoCategory.BASICS)
    def run():
        print("...")

    run_demo("arrays")
"""

from __future__ import annotations

import contextlib
import io
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from primer.core.config import DemoConfig
from primer.core.constants import DemoCategory, DEMO_CATEGORY_NAMES, BANNER_WIDTH
from primer.core.exceptions import (
    DemoError,
    DemoNotFoundError,
    DuplicateDemoError,
    DemoExecutionError,
)
from primer.core.logging_config import get_logger, log_function_call
from primer.demos import pacing

logger = get_logger("demos.registry")

# Category display order
_CATEGORY_ORDER = {category: index for index, category in enumerate(DemoCategory)}


@dataclass
class DemoEntry:
    """A registered demo."""
    name: str
    title: str
    category: DemoCategory
    run: Callable[[], None]
    summary: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "title": self.title,
            "category": self.category.value,
            "category_name": DEMO_CATEGORY_NAMES[self.category],
            "summary": self.summary,
        }


_registry: Dict[str, DemoEntry] = {}
_capture_lock = threading.Lock()


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def register_demo(
    name: str,
    title: str,
    category: DemoCategory,
    summary: str = "",
) -> Callable[[Callable[[], None]], Callable[[], None]]:
    """
    Decorator registering a demo's run function.

    Args:
        name: Unique demo name used on the command line and in the API
        title: Human readable title
        category: Catalogue section
        summary: One-line description

    Returns:
        The decorator; the function itself is returned unchanged
    """
    key = _normalize(name)

    def decorator(func: Callable[[], None]) -> Callable[[], None]:
        if key in _registry:
            raise DuplicateDemoError(key)
        description = summary
        if not description and func.__doc__:
            description = func.__doc__.strip().splitlines()[0]
        _registry[key] = DemoEntry(
            name=key,
            title=title,
            category=category,
            run=func,
            summary=description,
        )
        logger.debug(f"Registered demo '{key}' in {category.value}")
        return func

    return decorator


def get_demo(name: str) -> DemoEntry:
    """Look up a demo by name (case-insensitive, '-' and '_' are equivalent)."""
    entry = _registry.get(_normalize(name))
    if entry is None:
        raise DemoNotFoundError(name, sorted(_registry))
    return entry


def list_demos(category: Optional[DemoCategory] = None) -> List[DemoEntry]:
    """List demos sorted by category then name."""
    entries = [
        entry for entry in _registry.values()
        if category is None or entry.category == category
    ]
    return sorted(entries, key=lambda s: (_CATEGORY_ORDER[s.category], s.name))


def run_demo(name: str, config: Optional[DemoConfig] = None) -> DemoEntry:
    """
    Run a single demo.

    Args:
        name: Demo name
        config: Pacing configuration; defaults to real-time pacing

    Returns:
        The entry of the demo that ran

    Raises:
        DemoNotFoundError: If no demo has that name
        DemoExecutionError: If the demo raised; the original error is chained
    """
    entry = get_demo(name)
    pacing.configure(config)

    logger.info(f"Running demo '{entry.name}'")
    try:
        entry.run()
    except DemoError:
        raise
    except Exception as e:
        logger.error(f"Demo '{entry.name}' failed: {e}")
        raise DemoExecutionError(entry.name, str(e)) from e
    logger.info(f"Finished demo '{entry.name}'")
    return entry


@log_function_call(logger)
def run_all(
    config: Optional[DemoConfig] = None,
    category: Optional[DemoCategory] = None,
) -> List[str]:
    """Run every demo, printing a banner before each. Returns the names run."""
    names = []
    for entry in list_demos(category):
        print("=" * BANNER_WIDTH)
        print(f"  {entry.title}  [{entry.name}]")
        print("=" * BANNER_WIDTH)
        run_demo(entry.name, config)
        print()
        names.append(entry.name)
    return names


def capture_demo(name: str, config: Optional[DemoConfig] = None) -> str:
    """Run a demo with stdout captured and return what it printed."""
    # redirect_stdout swaps the process-wide sys.stdout, so captures are serialized
    with _capture_lock:
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            run_demo(name, config)
        return buffer.getvalue()
