"""
Configuration Module

Loads settings from environment variables and .env file.
"""

import os
from dataclasses import dataclass
from typing import List, Optional
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv
PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / "config" / ".env"
load_dotenv(dotenv_path=ENV_PATH)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class Config:
    """
    Application configuration.

    All settings are loaded from environment variables.
    See config/.env.example for available options.
    """

    # === Adder Settings ===
    ceiling: int = 1000              # Values above this are ignored (0 = disabled)
    strict_headers: bool = True      # "//" without newline is an error

    # === Shell Settings ===
    exit_command: str = "exit"

    # === Logging Settings ===
    log_level: str = "WARNING"
    log_json: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """
        Load configuration from environment variables.

        Environment variables override defaults.
        """
        def get_bool(key: str, default: bool) -> bool:
            """Helper to parse boolean env vars."""
            value = os.getenv(key, str(default)).lower()
            return value in ("true", "1", "yes")

        def get_int(key: str, default: int) -> int:
            """Helper to parse int env vars."""
            try:
                return int(os.getenv(key, default))
            except ValueError:
                return default

        return cls(
            # Adder
            ceiling=get_int("ADDER_CEILING", 1000),
            strict_headers=get_bool("ADDER_STRICT_HEADERS", True),

            # Shell
            exit_command=os.getenv("ADDER_EXIT_COMMAND", "exit"),

            # Logging
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
            log_json=get_bool("LOG_JSON", False),
            log_file=os.getenv("LOG_FILE") or None,
        )

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.ceiling < 0:
            errors.append("ADDER_CEILING must be 0 (disabled) or a positive integer")

        if not self.exit_command.strip():
            errors.append("ADDER_EXIT_COMMAND must not be blank")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of: {', '.join(VALID_LOG_LEVELS)}")

        return errors

    def __post_init__(self):
        """Validate after initialization."""
        errors = self.validate()
        if errors:
            raise ValueError(f"Configuration errors: {errors}")


# === Convenience function ===

def load_config() -> Config:
    """
    Load configuration from environment.

    Usage:
        from string_adder.config import load_config
        config = load_config()
    """
    return Config.from_env()
