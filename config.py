"""Library configuration — environment variables and derived constants.

Loads ``TELEGRAM_API_URL``, ``LOG_LEVEL`` and ``LOG_FILE`` from the
environment via ``python-dotenv``.  All values are resolved at import time
so other modules can ``from config import …`` without repeated lookups.

Bot tokens are deliberately absent: callers pass them to
:meth:`telegram_types.methods.Method.url` explicitly.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_log_level(raw: str | None) -> int:
    """Translate a level name (``"DEBUG"``) or number (``"10"``) to an int.

    Unknown names fall back to ``WARNING`` so a typo never silences errors.
    """
    if not raw:
        return logging.WARNING
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.WARNING


def _resolve_api_url(raw: str | None) -> str:
    """Return the Bot API host URL without a trailing slash."""
    return (raw or "https://api.telegram.org").strip().rstrip("/")


# ── Public constants ─────────────────────────────────────────────────────────

TELEGRAM_API_URL: str = _resolve_api_url(os.environ.get("TELEGRAM_API_URL"))
LOG_LEVEL: int = _parse_log_level(os.environ.get("LOG_LEVEL"))
LOG_FILE: str | None = os.environ.get("LOG_FILE") or None
