"""
Centralized environment variable loading for Python Primer.

This module ensures .env is loaded once and consistently across the entire application.

Usage:
    from primer.core.env_loader import ensure_env_loaded
    ensure_env_loaded()
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_env_loaded = False

ENV_PREFIX = "PRIMER_"


def get_project_root() -> Path:
    """Get the project root directory (where .env is located)."""
    # This file is at primer/core/env_loader.py
    return Path(__file__).parent.parent.parent


def ensure_env_loaded(override: bool = False) -> bool:
    """
    Ensure environment variables from .env are loaded.

    Args:
        override: If True, .env values replace variables already set in the process

    Returns:
        True if .env was loaded, False if already loaded or file not found
    """
    global _env_loaded

    if _env_loaded:
        return False

    env_path = get_project_root() / ".env"

    if not env_path.exists():
        return False

    load_dotenv(env_path, override=override)
    _env_loaded = True
    return True


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get a Primer setting from the environment.

    Args:
        name: Setting name, with or without the PRIMER_ prefix
        default: Value returned when the variable is unset or empty

    Returns:
        Variable value or default
    """
    ensure_env_loaded()

    key = name if name.startswith(ENV_PREFIX) else f"{ENV_PREFIX}{name}"
    value = os.getenv(key)
    if value:
        return value
    return default
