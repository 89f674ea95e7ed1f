import logging

from apscheduler.schedulers.background import BackgroundScheduler
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from kinokritik.routers import health, movies, movies_of_the_day, queries, review
from kinokritik.core.config import get_settings
from kinokritik.core.constants import RANDOM_QUERIES
from kinokritik.core.exceptions import BaseAppException
from kinokritik.core.service_factory import close_services
from kinokritik.db import get_database, ensure_indexes, close_client
from kinokritik.services import MovieService

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Kinokritik API",
    description="Netzkino movie browser with TMDB artwork and satirical reviews",
    version="1.0.0"
)

# CORS middleware
origins_env = settings.CORS_ALLOW_ORIGINS or ""
origins = [o.strip() for o in origins_env.split(",") if o.strip()] or [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(movies.router)
app.include_router(movies_of_the_day.router)
app.include_router(queries.router)
app.include_router(review.router)


@app.exception_handler(BaseAppException)
async def app_exception_handler(request: Request, exc: BaseAppException):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return JSONResponse(status_code=exc.status_code, content={"status": "Method Not Allowed"},
                            headers=getattr(exc, "headers", None))
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(status_code=exc.status_code, content={"status": "Not Found"})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Internal Server Error"})


def job_warm_movies_of_the_day():
    """Fetch today's movies ahead of the first visitor"""
    try:
        MovieService(get_database()).get_movies_of_the_day(RANDOM_QUERIES)
    except (BaseAppException, PyMongoError) as e:
        logger.error(f"Daily movies-of-the-day warm-up failed: {e}")


scheduler = None
if settings.ENABLE_SCHEDULER:
    scheduler = BackgroundScheduler(timezone="UTC")
    scheduler.add_job(
        job_warm_movies_of_the_day,
        trigger="cron",
        hour=settings.SCHEDULE_HOUR,
        minute=settings.SCHEDULE_MINUTE,
        id="daily_movies_of_the_day",
        replace_existing=True,
    )


@app.on_event("startup")
def on_startup():
    try:
        ensure_indexes(get_database())
    except PyMongoError as e:
        logger.error(f"Could not ensure MongoDB indexes: {e}")
    if scheduler is not None and not scheduler.running:
        scheduler.start()


@app.on_event("shutdown")
def on_shutdown():
    if scheduler is not None and scheduler.running:
        scheduler.shutdown(wait=False)
    close_services()
    close_client()
