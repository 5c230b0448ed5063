"""FastAPI application setup for the city weather service."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import router as weather_router
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="app/main")

app = FastAPI(title="City Weather Forecast")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Answer routing errors with the service's JSON error shape."""
    message = "Not Found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"message": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Last resort for anything the routes did not map."""
    logger.exception(f"Unhandled error during request processing: {exc}")
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


app.include_router(weather_router)
