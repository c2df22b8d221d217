# app/api/ping.py
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import PlainTextResponse
from dependency_injector.wiring import inject, Provide

from app.core.container import Container
from app.core.exceptions import MalformedPingBodyException
from app.core.security import OperatorGuard
from app.services.ping_store import PingStore

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["ping"])


@router.post("/{full_path:path}", response_class=PlainTextResponse, summary="Record a ping")
@inject
async def record_ping(
    full_path: str,
    request: Request,
    authorization: Optional[str] = Header(default=None),
    guard: OperatorGuard = Depends(Provide[Container.operator_guard]),
    store: PingStore = Depends(Provide[Container.ping_store]),
):
    # 1. Сначала авторизация, тело неавторизованного запроса не читаем
    guard.verify(authorization)

    # 2. Тело запроса = причина, строго UTF-8
    body = await request.body()
    try:
        reason = body.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("ping.malformed_body", size=len(body))
        raise MalformedPingBodyException() from None

    # 3. Запись в историю
    await store.record(reason)
    logger.info("ping.accepted", reason_length=len(reason), stored=len(store))

    return PlainTextResponse("Ok")
