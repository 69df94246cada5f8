"""
Configuration settings for mthread.

All settings are managed through environment variables with sensible defaults.
"""

import os


class Config:
    """Centralized configuration with environment variable support."""

    # Validation Constants
    MIN_STACK_SIZE: int = 32 * 1024
    MAX_THREADS_LIMIT: int = 10000
    LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    # Thread defaults
    MTHREAD_DAEMON: bool = os.environ.get("MTHREAD_DAEMON", "false").lower() in ("true", "1", "yes")
    MTHREAD_STACK_SIZE: int = int(os.environ.get("MTHREAD_STACK_SIZE", "0"))
    MTHREAD_THREAD_NAME_PREFIX: str = os.environ.get("MTHREAD_THREAD_NAME_PREFIX", "mthread")

    # Thread-count limit per primitive (0 = unlimited)
    MTHREAD_MAX_THREADS: int = int(os.environ.get("MTHREAD_MAX_THREADS", "0"))

    # Logging
    MTHREAD_LOG_LEVEL: str = os.environ.get("MTHREAD_LOG_LEVEL", "INFO").upper()

    @classmethod
    def validate(cls) -> list[str]:
        """Validate configuration and return list of errors.

        Returns empty list if configuration is valid.
        """
        errors: list[str] = []

        # A stack size of 0 selects the platform default
        if cls.MTHREAD_STACK_SIZE < 0:
            errors.append("MTHREAD_STACK_SIZE must be non-negative")
        elif 0 < cls.MTHREAD_STACK_SIZE < cls.MIN_STACK_SIZE:
            errors.append(f"MTHREAD_STACK_SIZE must be 0 or at least {cls.MIN_STACK_SIZE} bytes")

        if cls.MTHREAD_MAX_THREADS < 0 or cls.MTHREAD_MAX_THREADS > cls.MAX_THREADS_LIMIT:
            errors.append(f"MTHREAD_MAX_THREADS must be between 0 and {cls.MAX_THREADS_LIMIT}")

        if not cls.MTHREAD_THREAD_NAME_PREFIX:
            errors.append("MTHREAD_THREAD_NAME_PREFIX must not be empty")

        if cls.MTHREAD_LOG_LEVEL not in cls.LOG_LEVELS:
            errors.append(f"MTHREAD_LOG_LEVEL must be one of {', '.join(cls.LOG_LEVELS)}")

        return errors


def get_config() -> type[Config]:
    """Get the Config class."""
    return Config
