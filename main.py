import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from database import SessionLocal, check_connection
from services import (
    ConcurrentUpdateError,
    IndexationError,
    InvalidRecordError,
    RecordNotFoundError,
    RecordStore,
    StoreError,
    UnknownCollectionError,
)
from utils.email import send_rent_reminder_email

# Load .env
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("rentify")


def _default_blob_store():
    if not os.getenv("AZURE_STORAGE_ACCOUNT"):
        logger.warning("AZURE_STORAGE_ACCOUNT is not set; uploads are disabled")
        return None
    from services.blob_store import AzureBlobStore
    return AzureBlobStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    live = getattr(app.state, "live_payments", None)
    if live is not None:
        live.close()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(store=None, blob_store=None, mailer=None, analysis_client=None) -> FastAPI:
    """
    Build the API.

    Collaborators default to the production ones: the SQLAlchemy record
    store, Azure blob storage (when configured), Brevo email and the
    Anthropic client created on demand.
    """
    app = FastAPI(title="Rentify API", lifespan=lifespan)

    app.state.store = store or RecordStore(SessionLocal)
    app.state.blob_store = blob_store if blob_store is not None else _default_blob_store()
    app.state.mailer = mailer or send_rent_reminder_email
    app.state.analysis_client = analysis_client
    app.state.live_payments = None

    # CORS
    origins = os.getenv("CORS_ORIGINS", "").split(",")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Domain errors -> JSON
    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError):
        return _error(404, str(exc))

    @app.exception_handler(UnknownCollectionError)
    async def unknown_collection_handler(request: Request, exc: UnknownCollectionError):
        return _error(404, str(exc))

    @app.exception_handler(ConcurrentUpdateError)
    async def conflict_handler(request: Request, exc: ConcurrentUpdateError):
        return _error(409, str(exc))

    @app.exception_handler(IndexationError)
    async def indexation_handler(request: Request, exc: IndexationError):
        return _error(422, str(exc))

    @app.exception_handler(InvalidRecordError)
    async def invalid_record_handler(request: Request, exc: InvalidRecordError):
        return _error(422, str(exc))

    @app.exception_handler(ValidationError)
    async def record_validation_handler(request: Request, exc: ValidationError):
        return _error(422, str(exc))

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
        return _error(503, "Le service de données est indisponible, réessayez plus tard.")

    from routers import ALL_ROUTERS
    for router in ALL_ROUTERS:
        app.include_router(router)

    @app.get("/api/health")
    def health():
        database_ok = check_connection()
        return {"status": "ok" if database_ok else "degraded", "database": database_ok}

    # 404 Fallback Middleware
    @app.middleware("http")
    async def not_found_middleware(request: Request, call_next):
        try:
            response = await call_next(request)
            if response.status_code == 404 and "endpoint" not in request.scope:
                return JSONResponse(status_code=404, content={"error": "Route not found"})
            return response
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return app


app = create_app()

if __name__ == "__main__":
    port = int(os.getenv("PORT", 10000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
