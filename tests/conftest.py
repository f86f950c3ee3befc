"""
Pytest Configuration and Fixtures

Shared fixtures for all tests.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Dict, Any

from primer.core.config import DemoConfig, get_default_config, set_config
from primer.demos import pacing


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def fast_config() -> DemoConfig:
    """Demo config with sleeps disabled and a fixed seed."""
    return DemoConfig(time_scale=0, seed=42)


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch):
    """Give every test default config and instant pacing, free of PRIMER_* env vars."""
    for name in ("PRIMER_TIME_SCALE", "PRIMER_SEED", "PRIMER_API_PORT"):
        monkeypatch.delenv(name, raising=False)
    config = get_default_config()
    config.demos.time_scale = 0
    set_config(config)
    pacing.configure(DemoConfig(time_scale=0, seed=42))
    yield
    set_config(None)


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Sample configuration for testing."""
    return {
        "app_name": "Python Primer",
        "version": "1.0.0",
        "verbose_logging": False,
        "paths": {"logs_dir": "custom_logs"},
        "demos": {
            "time_scale": 0.5,
            "seed": 7
        },
        "game": {
            "vs_computer": True,
            "computer_mark": "x",
            "seed": 3
        },
        "api": {
            "host": "0.0.0.0",
            "port": 9000,
            "demo_run_limit": "5/minute",
            "game_create_limit": "10/minute",
            "max_games": 25,
            "cors_origins": ["http://example.com"]
        }
    }
