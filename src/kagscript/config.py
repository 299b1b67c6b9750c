"""ContextVar-based parse configuration for kagscript.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Cursor snapshots the active config when it is created, so a parse pass
never observes a config change halfway through.

Usage:
    from kagscript.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(strict_inline_tags=True)):
        script = parse(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is intentionally excluded. It is per-call state
    and lives on the Cursor.

    Attributes:
        strict_inline_tags: Raise InvalidTagError for ``[`` without ``]``
            instead of scanning to end of input
        skip_leading_whitespace: Skip whitespace before routing each line,
            so no Text token starts with ASCII whitespace

    """

    strict_inline_tags: bool = False
    skip_leading_whitespace: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "strict_inline_tags": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_inline_tags
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

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ParseConfig to use within the context.

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
