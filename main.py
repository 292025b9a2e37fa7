import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from routers import companies, jobs
from utils.database import init_pool, close_pool
from utils.errors import AppError, ErrorKind

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_pool()

    yield
    await close_pool()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def status_for(kind: ErrorKind) -> int:
    match kind:
        case ErrorKind.BAD_REQUEST:
            return status.HTTP_400_BAD_REQUEST
        case ErrorKind.NOT_FOUND:
            return status.HTTP_404_NOT_FOUND
        case ErrorKind.UNAUTHORIZED:
            return status.HTTP_401_UNAUTHORIZED
        case _:
            return status.HTTP_500_INTERNAL_SERVER_ERROR


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    status_code = status_for(exc.kind)
    if status_code >= 500:
        logger.error("%s %s - %r", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.detail},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def exception_handler(request: Request, exc: Exception):
    logger.error(
        "%s %s - %s",
        request.method,
        request.url.path,
        exc,
        exc_info=True
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error"}
    )


app.include_router(companies.router)
app.include_router(jobs.router)
