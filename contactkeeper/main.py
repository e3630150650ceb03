"""FastAPI application entrypoint. No business logic; only wiring, error handlers and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from contactkeeper import __version__
from contactkeeper.api import router as api_router
from contactkeeper.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Contact Keeper API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Wildcard origins are only honoured in dev.
if settings.APP_ENV == "dev":
    allowed_origins = settings.CORS_ORIGINS
else:
    allowed_origins = [origin for origin in settings.CORS_ORIGINS if origin != "*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _field_error(err: dict[str, Any]) -> dict[str, str]:
    """Flatten one pydantic error into {msg, param, location}."""
    loc = err.get("loc") or ()
    location = str(loc[0]) if loc else "body"
    param = ".".join(str(part) for part in loc[1:])
    msg = str(err.get("msg", "Invalid value"))
    # Surface the validator's own message instead of pydantic's "Value error, ..." wrapper.
    ctx_error = (err.get("ctx") or {}).get("error")
    if err.get("type") == "value_error" and ctx_error is not None:
        msg = str(ctx_error)
    elif msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return {"msg": msg, "param": param, "location": location}


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [_field_error(err) for err in exc.errors()]
    logger.info(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(errors)},
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"msg": "Server error"},
    )


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Contact Keeper API"}
