# app/api/status.py
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from dependency_injector.wiring import inject, Provide

from app.core.container import Container
from app.services.ping_store import PingStore
from app.services.status_page import StatusPageRenderer

router = APIRouter(tags=["status"])


@router.get("/{full_path:path}", response_class=HTMLResponse, summary="Status page")
@inject
async def status_page(
    full_path: str,
    store: PingStore = Depends(Provide[Container.ping_store]),
    renderer: StatusPageRenderer = Depends(Provide[Container.status_renderer]),
):
    """
    HTML со списком последних пингов, самый свежий первым.
    Отвечает на любой путь, ошибок не бывает: пустая история = пустой список.
    """
    pings = await store.snapshot()
    return HTMLResponse(renderer.render(pings))
