# app/core/exceptions.py
from fastapi import HTTPException, Request, status
from fastapi.responses import PlainTextResponse


class CanaryException(HTTPException):
    """Base exception; detail is sent back verbatim as text/plain."""
    def __init__(self, detail: str, status_code: int, headers: dict | None = None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class OperatorUnauthorizedException(CanaryException):
    # без подробностей: нет заголовка и неверный токен выглядят одинаково
    def __init__(self):
        super().__init__(
            "Unauthorized",
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )


class MalformedPingBodyException(CanaryException):
    def __init__(self):
        super().__init__("Bad Request", status_code=status.HTTP_400_BAD_REQUEST)


async def canary_exception_handler(request: Request, exc: CanaryException) -> PlainTextResponse:
    return PlainTextResponse(exc.detail, status_code=exc.status_code, headers=exc.headers)
