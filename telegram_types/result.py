"""The response envelope every Bot API method answers with.

::

    result = TelegramResult[List[Update]].decode(raw)
    updates = result.into_outcome()  # or raises ApiError
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar, Union

from pydantic import StrictBool

from core.logger import TelegramTypesLogger
from telegram_types.codec import TelegramModel
from telegram_types.exceptions import ApiError
from telegram_types.models import ResponseParameters

logger = TelegramTypesLogger.get_logger()

T = TypeVar("T")

MISSING_RESULT = "ok:true but result missing"
MISSING_ERROR_CODE = "ok: false without error_code"


class TelegramResult(TelegramModel, Generic[T]):
    """Envelope ``{"ok", "result", "description", "error_code", "parameters"}``.

    Decoding is purely structural: a missing or non-boolean ``ok`` and
    wrongly typed fields fail, but ``ok`` is not cross-checked against the
    other fields until :meth:`into_outcome`.
    """

    ok: StrictBool
    result: Optional[T] = None
    description: Optional[str] = None
    error_code: Optional[int] = None
    parameters: Optional[ResponseParameters] = None

    @classmethod
    def decode(cls, raw: Union[bytes, str]) -> "TelegramResult[T]":
        """Decode a raw response body.

        Raises:
            pydantic.ValidationError: If the envelope or its payload is malformed.
        """
        return cls.model_validate_json(raw)

    def into_outcome(self) -> T:
        """Return the payload of a successful response.

        Raises:
            ApiError: If ``ok`` is false, or ``ok`` is true without a ``result``.
        """
        if self.ok:
            if self.result is None:
                logger.warning("Success envelope without result", extra={"error_code": 0})
                raise ApiError(0, MISSING_RESULT, self.parameters)
            return self.result

        description = self.description or ""
        if self.error_code is None:
            error_code = 0
            description = f"{MISSING_ERROR_CODE}: {description}" if description else MISSING_ERROR_CODE
        else:
            error_code = self.error_code
        logger.info("API reported failure", extra={"error_code": error_code, "description": description})
        raise ApiError(error_code, description, self.parameters)
