"""Exception hierarchy for telegram-types.

Structural decode failures surface as :class:`pydantic.ValidationError`;
this module only covers the API tier, i.e. envelopes that decoded fine but
report a failure.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from telegram_types.ids import ChatId
    from telegram_types.models import ResponseParameters


class ApiError(Exception):
    """A Telegram Bot API response with ``ok: false`` (or a malformed success).

    Attributes:
        error_code: Code reported by the API; ``0`` when the envelope carried
            none, or when a success envelope had no ``result``.
        description: Human-readable description from the API, possibly empty.
        parameters: Optional hints for retrying the request.
    """

    def __init__(
        self,
        error_code: int,
        description: str = "",
        parameters: Optional["ResponseParameters"] = None,
    ) -> None:
        """Initialise with the API error code, description and retry hints."""
        self.error_code = error_code
        self.description = description
        self.parameters = parameters
        super().__init__(f"API error {error_code}: {description}")

    @property
    def retry_after(self) -> Optional[int]:
        """Seconds to wait before repeating a flood-limited request."""
        if self.parameters is None:
            return None
        return self.parameters.retry_after

    @property
    def migrate_to_chat_id(self) -> Optional["ChatId"]:
        """New identifier of a group that was migrated to a supergroup."""
        if self.parameters is None:
            return None
        return self.parameters.migrate_to_chat_id
