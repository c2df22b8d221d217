from pydantic import AwareDatetime, BaseModel, ConfigDict


class PingEvent(BaseModel):
    """Один сигнал жизни: текст причины и момент приёма (с таймзоной)."""
    model_config = ConfigDict(frozen=True)

    reason: str
    timestamp: AwareDatetime
