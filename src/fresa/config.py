"""ContextVar-based parse configuration for Fresa.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Lexer and Parser read the config active when they are constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from fresa.config import ParseConfig, parse_config_context
    from fresa.parser import Parser

    with parse_config_context(ParseConfig(strict=True)):
        lines = list(Parser.from_source("N G90"))  # raises GCodeSyntaxError

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        strict: Report malformed optional fields instead of dropping them.
            In lenient mode (the default) an ``N`` without a number is
            treated as an absent line number, and an ``O`` without a number
            falls through to command parsing.
        skip_comments: Skip ``(...)`` and ``; ...`` comments in the lexer.
            When disabled, ``(`` and ``;`` are unrecognized characters.

    """

    strict: bool = False
    skip_comments: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ParseConfig.from_dict({"strict": True, "units": "mm"}).strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(strict=True)):
        ...     get_parse_config().strict
        True
        >>> get_parse_config().strict
        False

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
