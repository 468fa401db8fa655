"""Ambient infrastructure — structured logging.

This package is model-agnostic. It must NEVER import from ``telegram_types/``.
"""

from core.logger import TelegramTypesLogger

__all__ = [
    "TelegramTypesLogger",
]
