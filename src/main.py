from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.border import router as border_router
from src.adapters.aws import env_bool
from src.domain.exceptions import BorderGeometryError

app = FastAPI(title="BorderDistance")
app.include_router(border_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so the map page can display them."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = env_bool("BORDER_REVEAL_ERRORS", False)
    if reveal or isinstance(
        exc, (BorderGeometryError, FileNotFoundError, RuntimeError, ValueError)
    ):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
