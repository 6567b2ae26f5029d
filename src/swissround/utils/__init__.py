"""Shared helpers: logger setup and id generation."""

# Swiss Round
# Copyright (C) 2025  Swiss Round developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
import uuid
from typing import Optional

LOG_LEVEL_ENV_VAR = "SWISSROUND_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_ROOT_LOGGER_NAME = "swissround"


def _configure_root_logger() -> logging.Logger:
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
        root.setLevel(getattr(logging, level_name, logging.WARNING))
    return root


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger hanging off the package logger.

    The package logger is configured once, with its level taken from the
    ``SWISSROUND_LOG_LEVEL`` environment variable.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        A configured ``logging.Logger``
    """
    _configure_root_logger()
    if name == _ROOT_LOGGER_NAME or name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


def generate_id(prefix: Optional[str] = None) -> str:
    """Generate a unique identifier, optionally prefixed (e.g. ``competitor-...``)."""
    unique = uuid.uuid4().hex
    if prefix:
        return f"{prefix.lower()}-{unique[:12]}"
    return str(uuid.UUID(unique))
