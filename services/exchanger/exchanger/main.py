"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import router
from .cors import add_cors
from .errors import ExchangeError
from .settings import settings


logger = logging.getLogger(settings.APP_NAME)


app = FastAPI(title=settings.APP_NAME)
add_cors(app, settings)
app.include_router(router)


@app.on_event("startup")
async def startup() -> None:
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    logger.info("Exchanger server is started!")


@app.exception_handler(ExchangeError)
async def exchange_error_handler(_: Request, exc: ExchangeError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "internal error"})


@app.get("/health")
async def health():
    return {"ok": True, "data": {"status": "healthy"}, "ts": datetime.now(timezone.utc).isoformat()}


def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    config = uvicorn.Config(
        app,
        host=host or settings.HOST,
        port=port if port is not None else settings.PORT,
    )
    server = uvicorn.Server(config)
    error: Optional[BaseException] = None
    try:
        server.run()
    except (OSError, SystemExit) as exc:
        # uvicorn exits on its own when the socket cannot be bound
        error = exc
    if not server.started:
        reason = error if isinstance(error, OSError) else f"could not bind {config.host}:{config.port}"
        logger.critical("Failed to start server: %s", reason)
        raise SystemExit(1)
    if error is not None:
        raise error


if __name__ == "__main__":
    run()


__all__ = ["app", "run"]
