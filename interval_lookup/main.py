import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from interval_lookup.config import settings
from interval_lookup.db.crud import load_seed_file, seed_interval_records
from interval_lookup.db.database import IntervalStore
from interval_lookup.api.routes_server import router as server_router, get_store
from interval_lookup.services.display import DisplayState, MILEAGE_BUCKETS, VEHICLE_CLASSES, render_rows
from interval_lookup.services.lookup import StoreUnavailableError

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not Found"
INVALID_SELECTION_MESSAGE = "Invalid mileage selection, please try again"
STORE_UNAVAILABLE_MESSAGE = "Service interval data is temporarily unavailable"
INTERNAL_ERROR_MESSAGE = "Internal server error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = IntervalStore(settings.DATABASE_URL, echo=settings.DEBUG)
    app.state.store = store
    if settings.SEED_ON_STARTUP:
        await store.create_tables()
        if settings.SEED_FILE.exists():
            async with store.session() as db:
                await seed_interval_records(db, load_seed_file(settings.SEED_FILE))
        else:
            logger.warning(f"Seed file {settings.SEED_FILE} not found, skipping seed")
    yield
    await store.dispose()


app = FastAPI(title="Car Service Interval", version="0.1.0", lifespan=lifespan)

templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": INVALID_SELECTION_MESSAGE})


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
    return JSONResponse(status_code=503, content={"detail": STORE_UNAVAILABLE_MESSAGE})


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)
    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exc()
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}\n{tb}")
    return JSONResponse(
        status_code=500,
        content={"detail": INTERNAL_ERROR_MESSAGE},
    )


@app.get("/api/v1/health")
async def health_check(store: IntervalStore = Depends(get_store)):
    """Check store connectivity."""
    try:
        async with store.session() as db:
            await db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "connected"}
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        return {"status": "error", "database": "unavailable"}


# API routes
app.include_router(server_router)


# Serve frontend static files
frontend_dir = settings.FRONTEND_DIR
app.mount("/css", StaticFiles(directory=str(frontend_dir / "css"), check_dir=False), name="css")
app.mount("/js", StaticFiles(directory=str(frontend_dir / "js"), check_dir=False), name="js")


@app.get("/")
async def serve_index(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "buckets": MILEAGE_BUCKETS,
            "vehicle_classes": VEHICLE_CLASSES,
            "rows": render_rows(DisplayState()),
        },
    )
