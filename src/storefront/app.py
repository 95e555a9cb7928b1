"""PureFood FastAPI application.

Serves the storefront over HTTP on top of the local backend, so the remote
backend of another storefront process can talk to it.

Usage:
    uvicorn storefront.app:create_app --factory --host 0.0.0.0 --port 5000
"""

from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.api import auth_router, order_router, product_router
from storefront.backends.local_adapter import LocalBackend
from storefront.config import Settings, load_settings
from storefront.domain import init_domain, storefront
from storefront.exceptions import AuthFailure
from storefront.storage import open_store
from storefront.storage.port import KeyValueStore
from storefront.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


def _request_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][-1]) if error.get("loc") else "body"
        errors.setdefault(field, []).append(error["msg"])
    return errors


def create_app(settings: Settings | None = None, store: KeyValueStore | None = None) -> FastAPI:
    """Build the API over a local backend.

    ``store`` defaults to the store at ``settings.store_uri``.
    """
    settings = settings or load_settings()
    init_domain()

    app = FastAPI(
        title="PureFood API",
        description="Storefront catalogue, orders and admin access",
    )
    app.state.settings = settings
    app.state.store = store if store is not None else open_store(settings.store_uri)
    app.state.backend = LocalBackend(app.state.store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context and bind a request id for logging."""
        add_context(request_id=uuid4().hex, path=request.url.path)
        try:
            with storefront.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        return response

    # -------------------------------------------------------------------
    # Error mapping
    # -------------------------------------------------------------------
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.info("Request rejected", path=request.url.path, errors=exc.messages)
        return JSONResponse(status_code=400, content={"errors": exc.messages})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"errors": _request_errors(exc)})

    @app.exception_handler(ObjectNotFoundError)
    async def not_found_handler(request: Request, exc: ObjectNotFoundError):
        return JSONResponse(status_code=404, content={"error": "Not found"})

    @app.exception_handler(AuthFailure)
    async def auth_failure_handler(request: Request, exc: AuthFailure):
        logger.warning("Unauthorized request", path=request.url.path, reason=exc.message)
        return JSONResponse(status_code=401, content={"error": exc.message})

    # -------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------
    app.include_router(auth_router, prefix="/api")
    app.include_router(product_router, prefix="/api")
    app.include_router(order_router, prefix="/api")

    @app.get("/health")
    async def health():
        durable = getattr(app.state.store, "is_durable", False)
        return JSONResponse(content={"status": "ok", "durable_store": durable, "domain": storefront.name})

    logger.info("API ready", store_uri=settings.store_uri)
    return app
