"""
FastAPI application factory and configuration.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings, get_settings
from ..core.exceptions import AuthenticationError
from ..services import (
    AuditLog,
    BookingService,
    Database,
    IdentityService,
    PasswordHasher,
    ResourceCatalog,
    SeedService,
    TokenService,
)
from ..utils.logging import configure_logging
from .dependencies import CallerResolver
from .errors import authentication_error_handler, request_validation_error_handler
from .handlers import (
    AuditHandler,
    AuthHandler,
    BookingHandler,
    DevHandler,
    HealthHandler,
    ResourceHandler,
)
from .middleware import LoggingMiddleware, SecurityHeaders


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    # Fails fast on a missing or short signing key
    tokens = TokenService(settings.jwt_key, settings.jwt_algorithm, settings.token_ttl_hours)

    database = Database(settings.database_config())
    database.create_schema()

    catalog = ResourceCatalog(database)
    audit_log = AuditLog(database)
    booking_service = BookingService(database, catalog, audit_log)
    identity = IdentityService(database, tokens, PasswordHasher(settings.bcrypt_rounds))
    current_caller = CallerResolver(identity)

    app = FastAPI(
        title=settings.app_name,
        description="Shared resource booking with overlap protection and audit trail",
        version=settings.app_version,
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeaders)
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.state.settings = settings
    app.state.database = database
    app.state.booking_service = booking_service
    app.state.identity = identity

    app.include_router(HealthHandler(settings, database).router, prefix="/health", tags=["health"])
    app.include_router(AuthHandler(identity).router, prefix="/auth", tags=["auth"])
    app.include_router(
        ResourceHandler(catalog, current_caller).router, prefix="/resources", tags=["resources"]
    )
    app.include_router(
        BookingHandler(booking_service, current_caller).router, prefix="/bookings", tags=["bookings"]
    )
    app.include_router(
        AuditHandler(audit_log, current_caller).router, prefix="/audit", tags=["audit"]
    )

    if settings.enable_dev_seed:
        seed_service = SeedService(identity, catalog)
        app.include_router(DevHandler(seed_service).router, prefix="/dev", tags=["dev"])

    return app
