import logging
from typing import Any

from sqlalchemy.orm import Session

from translatable.adapter.enums.base import BaseAdapterActionEnum
from translatable.mapping.foreign_key import ForeignKeyCoercer
from translatable.mapping.strategy import TranslationStrategySelector

logger = logging.getLogger(__name__)


class BaseAdapter:
    """Shared collaborators of the translation components."""

    def __init__(
        self,
        session: Session,
        selector: TranslationStrategySelector,
        coercer: ForeignKeyCoercer,
    ) -> None:
        self.session = session
        self.selector = selector
        self.coercer = coercer

    def _log(self, action: BaseAdapterActionEnum, **context: Any) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        details = " ".join(f"{key}={value!r}" for key, value in context.items())
        logger.debug("%s.%s %s", type(self).__name__, action, details)
