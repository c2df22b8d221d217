# app/core/container.py

from dependency_injector import containers, providers

from app.core.security import OperatorGuard
from app.core.settings import Settings
from app.services.ping_store import PingStore
from app.services.status_page import StatusPageRenderer


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(
        modules=["app.api.status", "app.api.ping"]
    )

    settings = providers.Singleton(Settings)

    # одна история на процесс, общая для всех запросов
    ping_store = providers.Singleton(
        PingStore,
        capacity=settings.provided.PING_CAPACITY,
    )

    operator_guard = providers.Singleton(
        OperatorGuard,
        token=settings.provided.OPERATOR_TOKEN,
    )

    status_renderer = providers.Factory(
        StatusPageRenderer,
        capacity=settings.provided.PING_CAPACITY,
    )
