import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from config import Settings, load_settings
from infrastructure.database.database import Database
from routers.cart_router import router as cart_router
from routers.catalog_router import router as catalog_router
from routers.payment_router import router as payment_router
from routers.upload import router as upload_router
from routers.user_router import router as user_router
from services.auth.token_service import TokenService
from services.errors import ShopError
from services.file.image_storage_service import ImageStorageService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    database: Database = app.state.database
    await database.create_tables()
    logger.info("Database tables created/verified.")
    yield
    # Shutdown
    await database.dispose()


async def _shop_error_handler(request: Request, exc: ShopError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"success": False, "errors": jsonable_encoder(exc.errors())},
    )


async def _database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"success": False, "message": "Server error"})


def configure_logging(level: str) -> None:
    # Runs inside the process that serves requests, including uvicorn's reload worker.
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Shop Backend",
        description="API for the product catalog, user accounts, carts, favorites and payments",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings.database_url, echo=settings.sql_echo)
    app.state.token_service = TokenService(settings.jwt_secret)
    app.state.image_storage = ImageStorageService(settings.upload_dir, settings.public_base_url)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ShopError, _shop_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, _database_error_handler)

    # Include routers
    app.include_router(user_router, tags=["User"])
    app.include_router(cart_router, tags=["Cart"])
    app.include_router(catalog_router, tags=["Catalog"])
    app.include_router(upload_router, tags=["Upload"])
    app.include_router(payment_router, tags=["Payment"])

    app.mount(
        "/images",
        StaticFiles(directory=str(app.state.image_storage.upload_dir)),
        name="images",
    )

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root():
        return "API is running"

    # Health check
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


# Run app
if __name__ == "__main__":
    settings = load_settings()
    uvicorn.run(
        "main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
