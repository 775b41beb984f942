"""
Shared response helpers
"""
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from codereg.errors import CodeRegError


def rejection(exc: CodeRegError) -> JSONResponse:
    """
    Error response for a domain rejection

    Body:
        {
            "detail": "<user-visible message>",
            "notification": {...} | null   # banner posted for this rejection
        }
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.message,
            "notification": jsonable_encoder(exc.notification)
        }
    )
