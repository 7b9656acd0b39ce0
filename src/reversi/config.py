"""
Configuration parameters for Reversi.
"""
import json
import logging
import os
from dataclasses import asdict, dataclass, field
from typing import Any, Dict

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SearchConfig:
    """Configuration for the minimax bot."""
    depth: int = 3
    workers: int = 1  # Processes used for the root moves


@dataclass
class DisplayConfig:
    """Configuration for the console board."""
    clear_screen: bool = True
    show_valid_moves: bool = True
    empty_lines: int = 1


@dataclass
class ArenaConfig:
    """Configuration for bot-vs-bot matches."""
    rounds: int = 2
    depth_a: int = 1
    depth_b: int = 2


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Reversi"
    search: SearchConfig = field(default_factory=SearchConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> 'Config':
        """Raise ValueError for settings the engine cannot run with."""
        if self.search.depth < 1:
            raise ValueError(f"search.depth must be at least 1, got {self.search.depth}")
        if self.search.workers < 1:
            raise ValueError(f"search.workers must be at least 1, got {self.search.workers}")
        if self.arena.rounds < 1:
            raise ValueError(f"arena.rounds must be at least 1, got {self.arena.rounds}")
        if self.arena.depth_a < 1 or self.arena.depth_b < 1:
            raise ValueError("arena depths must be at least 1")
        if self.logging.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.logging.log_level}")
        if self.search.depth > 8:
            logger.warning("search.depth %d is above the recommended maximum of 8", self.search.depth)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Reversi'),
            search=SearchConfig(**config_dict.get('search', {})),
            display=DisplayConfig(**config_dict.get('display', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
