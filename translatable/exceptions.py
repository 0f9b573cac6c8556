from typing import Any, Optional


class TranslatableError(RuntimeError):
    """Base class for errors raised by the translatable extension."""


class TranslationWriteError(TranslatableError):
    """Raised when a raw translation insert does not report exactly one row."""

    def __init__(
        self,
        message: str,
        table: str,
        data: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.table = table
        self.data = data or {}
