"""
Horno Shadow Bridge REST API.

FastAPI application exposing the same routes as the Lambda handler, for local
development and front-end integration work:

    uvicorn horno_bridge.rest_api:app --port 5006

Error bodies match the Lambda: {"error": "<message>"}.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from horno_bridge import constants as CONSTANTS
from horno_bridge.api import processing, shadow
from horno_bridge.config import get_settings
from horno_bridge.core.exceptions import BridgeError
from horno_bridge.logger import configure_logger, logger, print_stack_trace


# --------- Lifespan context manager ----------
@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logger(get_settings().LOG_MODE)
    logger.info(f"API Startup. Thing: {CONSTANTS.THING_NAME}")
    yield


# --------- Initialize FastAPI app ----------
app = FastAPI(
    title="Horno Shadow Bridge API",
    version="1.0",
    description="Read/write the oven's device shadow and record PLC events.",
    openapi_tags=[
        {"name": "Shadow", "description": "Merged shadow state and desired-state patches."},
        {"name": "Processing", "description": "Change detection over reported PLC signals."},
    ],
    lifespan=lifespan
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=CONSTANTS.CORS_HEADERS)


@app.middleware("http")
async def add_cors_header(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(CONSTANTS.CORS_HEADERS)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return _error(404, "Not found")
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error(400, str(exc))


@app.exception_handler(BridgeError)
async def bridge_exception_handler(request: Request, exc: BridgeError):
    logger.error(f"Request failed: {exc}")
    print_stack_trace()
    return _error(500, str(exc))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Request failed: {exc}")
    print_stack_trace()
    return _error(500, str(exc))


app.include_router(shadow.router)
app.include_router(processing.router)
