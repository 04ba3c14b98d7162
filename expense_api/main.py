from typing import Optional

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .db.store import ExpenseStore
from .routers import expenses
from .services.expense_builder import Clock
from .services.ids import IdGenerator, uuid4_id
from .services.timestamps import utc_now


def create_app(
    settings_override: Optional[Settings] = None,
    store: Optional[ExpenseStore] = None,
    id_generator: Optional[IdGenerator] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    store / id_generator / clock: injectable collaborators; each app gets its
    own empty store unless one is supplied.
    """
    settings = settings_override or get_settings()
    # Initialize logging early
    init_logging(debug=settings.debug, json_output=settings.log_json)

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )

    # Per-app state shared with routers through dependencies
    app.state.settings = settings
    app.state.store = store if store is not None else ExpenseStore()
    app.state.id_generator = id_generator or uuid4_id
    app.state.clock = clock or utc_now

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(errors.ApiError, errors.api_error_handler)
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(expenses.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        return {"message": settings.app_name, "version": settings.version}

    return app


app = create_app()
