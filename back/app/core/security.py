from __future__ import annotations

import hmac
from typing import Optional

import structlog

from app.core.exceptions import OperatorUnauthorizedException

logger = structlog.get_logger(__name__)

BEARER_PREFIX = "Bearer "


class OperatorGuard:
    """
    Проверка единственного общего секрета оператора.

    Заголовок Authorization должен совпадать с "Bearer <token>" байт в байт:
    регистр схемы, лишние пробелы и пустой токен не прощаются.
    """

    def __init__(self, token: str):
        self._expected = (BEARER_PREFIX + token).encode("utf-8")

    def is_authorized(self, authorization: Optional[str]) -> bool:
        if authorization is None:
            return False
        return hmac.compare_digest(authorization.encode("utf-8"), self._expected)

    def verify(self, authorization: Optional[str]) -> None:
        if not self.is_authorized(authorization):
            # сам заголовок не логируем
            logger.warning("operator.unauthorized", header_present=authorization is not None)
            raise OperatorUnauthorizedException()
