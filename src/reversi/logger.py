"""
Logging utilities for Reversi.
"""
import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional

from .config import Config

LOGGER_NAME = "reversi"


class Logger:
    """Sets up the package logger and records match metrics."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_dir = None
        level = getattr(logging, config.logging.log_level.upper())

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.handlers = []

        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        self.handlers.append(console)

        # File logging goes to a timestamped run directory
        if config.logging.log_to_file:
            run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
            self.run_dir = os.path.join(self.log_dir, run_name)
            os.makedirs(self.run_dir, exist_ok=True)

            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'reversi.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

        if self.run_dir is not None:
            self.save_config()

    def save_config(self):
        """Save the configuration to a JSON file."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)

    def log_metrics(self, metrics: Dict[str, Any], step: int, prefix: str = ''):
        """
        Log metrics as one line.

        Args:
            metrics: Dictionary of metrics to log
            step: Current round/game number
            prefix: Prefix for metric names (e.g., 'arena/')
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {prefix}{name}={value:.4f}"
            else:
                log_str += f" {prefix}{name}={value}"
        self.logger.info(log_str)

    def close(self):
        """Remove and close the handlers this logger added."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
