import logging
import os
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from gallery.config import load_settings
from gallery.routers.gallery import router as gallery_router
from gallery.storage import StoreUnavailableError, store_backend_name

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper(), format=LOG_FORMAT)
logger = logging.getLogger("gallery")


class StoreErrorMiddleware(BaseHTTPMiddleware):
    """Turn object store failures into a single HTTP 500 error response.
    A failed listing never yields partial gallery data."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except StoreUnavailableError as exc:
            logger.error("Error: %s", exc)  # noqa: TRY400
            return JSONResponse(
                status_code=HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": f"Error: {exc}"},
            )


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    # Fail at startup, not on the first request, when S3 settings are missing
    if store_backend_name() == "s3":
        settings = load_settings()
        logger.info("Serving gallery from bucket %s", settings.bucket)
    yield


app = FastAPI(lifespan=lifespan)

app.add_middleware(StoreErrorMiddleware)

app.include_router(gallery_router)
