"""Logging setup shared by scripts and examples."""

from __future__ import annotations

import logging

from aerosim.utils.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_log_level(level: int | str) -> int:
    """Translate a numeric or named logging level into its numeric value.

    Args:
        level: Numeric level or a case-insensitive name such as ``"debug"``.

    Returns:
        Numeric logging level.

    Raises:
        aerosim.utils.exceptions.ConfigurationError: If ``level`` names no
            registered logging level.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        msg = f"unknown logging level: {level!r}"
        raise ConfigurationError(msg)
    return resolved


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging for report scripts and examples.

    Library modules only emit DEBUG records through ``logging.getLogger``;
    this helper decides whether they are shown.

    Args:
        level: Root logger level as a number or level name.

    Raises:
        aerosim.utils.exceptions.ConfigurationError: If ``level`` is an
            unknown level name.
    """
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)
