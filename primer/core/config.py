"""
Primer Configuration Management

Centralized configuration system with JSON loading, environment overrides
and validation.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .exceptions import ConfigurationError, InvalidConfigError, MissingConfigError
from .constants import (
    PROJECT_NAME,
    VERSION,
    DEFAULT_CONFIG_PATH,
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_DEMO_RUN_LIMIT,
    DEFAULT_GAME_CREATE_LIMIT,
    DEFAULT_MAX_GAMES,
)
from .env_loader import get_env


@dataclass
class DemoConfig:
    """Pacing settings shared by the demos."""
    time_scale: float = 1.0  # Multiplier applied to every demo sleep
    seed: Optional[int] = None  # Seed for the demo RNG

    def validate(self) -> None:
        if self.time_scale < 0:
            raise InvalidConfigError(
                f"time_scale must be >= 0, got {self.time_scale}",
                {"time_scale": self.time_scale}
            )

    @classmethod
    def from_dict(cls, data: dict) -> 'DemoConfig':
        """Create DemoConfig from dictionary."""
        return cls(
            time_scale=float(data.get('time_scale', 1.0)),
            seed=data.get('seed')
        )


@dataclass
class GameConfig:
    """Tic-tac-toe settings."""
    vs_computer: bool = False
    computer_mark: str = "O"
    seed: Optional[int] = None

    def validate(self) -> None:
        if self.computer_mark not in ("X", "O"):
            raise InvalidConfigError(
                f"computer_mark must be 'X' or 'O', got {self.computer_mark!r}",
                {"computer_mark": self.computer_mark}
            )

    @classmethod
    def from_dict(cls, data: dict) -> 'GameConfig':
        """Create GameConfig from dictionary."""
        return cls(
            vs_computer=bool(data.get('vs_computer', False)),
            computer_mark=str(data.get('computer_mark', 'O')).upper(),
            seed=data.get('seed')
        )


@dataclass
class ApiConfig:
    """HTTP API settings."""
    host: str = DEFAULT_API_HOST
    port: int = DEFAULT_API_PORT
    demo_run_limit: str = DEFAULT_DEMO_RUN_LIMIT
    game_create_limit: str = DEFAULT_GAME_CREATE_LIMIT
    max_games: int = DEFAULT_MAX_GAMES
    cors_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    def validate(self) -> None:
        if not 0 < self.port < 65536:
            raise InvalidConfigError(f"Invalid API port: {self.port}", {"port": self.port})
        if self.max_games < 1:
            raise InvalidConfigError(
                f"max_games must be at least 1, got {self.max_games}",
                {"max_games": self.max_games},
            )

    @classmethod
    def from_dict(cls, data: dict) -> 'ApiConfig':
        """Create ApiConfig from dictionary."""
        defaults = cls()
        return cls(
            host=data.get('host', defaults.host),
            port=int(data.get('port', defaults.port)),
            demo_run_limit=data.get('demo_run_limit', defaults.demo_run_limit),
            game_create_limit=data.get('game_create_limit', defaults.game_create_limit),
            max_games=int(data.get('max_games', defaults.max_games)),
            cors_origins=data.get('cors_origins', defaults.cors_origins)
        )


@dataclass
class PrimerConfig:
    """Main configuration class for Python Primer."""

    app_name: str = PROJECT_NAME
    version: str = VERSION

    logs_dir: Path = field(default_factory=lambda: Path("logs"))
    verbose_logging: bool = False

    demos: DemoConfig = field(default_factory=DemoConfig)
    game: GameConfig = field(default_factory=GameConfig)
    api: ApiConfig = field(default_factory=ApiConfig)

    def validate(self) -> None:
        """Validate every sub-configuration."""
        self.demos.validate()
        self.game.validate()
        self.api.validate()

    @classmethod
    def from_dict(cls, data: dict) -> 'PrimerConfig':
        """Create PrimerConfig from dictionary."""
        config = cls()

        config.app_name = data.get('app_name', config.app_name)
        config.version = data.get('version', config.version)
        config.verbose_logging = data.get('verbose_logging', config.verbose_logging)

        if 'paths' in data:
            config.logs_dir = Path(data['paths'].get('logs_dir', 'logs'))

        if 'demos' in data:
            config.demos = DemoConfig.from_dict(data['demos'])
        if 'game' in data:
            config.game = GameConfig.from_dict(data['game'])
        if 'api' in data:
            config.api = ApiConfig.from_dict(data['api'])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a JSON-serializable dictionary."""
        return {
            "app_name": self.app_name,
            "version": self.version,
            "verbose_logging": self.verbose_logging,
            "paths": {"logs_dir": str(self.logs_dir)},
            "demos": {
                "time_scale": self.demos.time_scale,
                "seed": self.demos.seed,
            },
            "game": {
                "vs_computer": self.game.vs_computer,
                "computer_mark": self.game.computer_mark,
                "seed": self.game.seed,
            },
            "api": {
                "host": self.api.host,
                "port": self.api.port,
                "demo_run_limit": self.api.demo_run_limit,
                "game_create_limit": self.api.game_create_limit,
                "max_games": self.api.max_games,
                "cors_origins": list(self.api.cors_origins),
            },
        }


def get_default_config() -> PrimerConfig:
    """Return a configuration with every default applied."""
    return PrimerConfig()


def apply_env_overrides(config: PrimerConfig) -> PrimerConfig:
    """
    Apply PRIMER_* environment variables on top of a loaded config.

    Recognised: PRIMER_TIME_SCALE, PRIMER_SEED, PRIMER_API_PORT.
    """
    try:
        time_scale = get_env("TIME_SCALE")
        if time_scale is not None:
            config.demos.time_scale = float(time_scale)

        seed = get_env("SEED")
        if seed is not None:
            config.demos.seed = int(seed)
            config.game.seed = int(seed)

        port = get_env("API_PORT")
        if port is not None:
            config.api.port = int(port)
    except ValueError as e:
        raise InvalidConfigError(f"Invalid environment override: {e}")

    return config


def load_config(
    config_path: Union[str, Path, None] = None,
    required: bool = False,
) -> PrimerConfig:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to configuration file. If None, uses default.
        required: Raise MissingConfigError instead of falling back to defaults
            when the file does not exist.

    Returns:
        Loaded and validated PrimerConfig instance
    """
    config_path = Path(config_path) if config_path else Path(DEFAULT_CONFIG_PATH)

    if not config_path.exists():
        if required:
            raise MissingConfigError(
                f"Config file not found: {config_path}",
                {"path": str(config_path)},
            )
        config = get_default_config()
    else:
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            config = PrimerConfig.from_dict(data)
        except json.JSONDecodeError as e:
            raise InvalidConfigError(f"Invalid JSON in config file: {e}")
        except (TypeError, ValueError, AttributeError) as e:
            raise InvalidConfigError(f"Invalid value in config file: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to load config: {e}")

    apply_env_overrides(config)
    config.validate()
    return config


def save_config(config: PrimerConfig, config_path: Union[str, Path]) -> None:
    """Save configuration to a JSON file."""
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2)


# Global config instance
_config: Optional[PrimerConfig] = None


def get_config() -> PrimerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: PrimerConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
