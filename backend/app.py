from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Final

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

load_dotenv()

# Local application imports
from api.context import GraphQLContext, create_context  # noqa: E402
from api.schema import create_schema  # noqa: E402
from domain.meal.services.meal_service import MealDomainService  # noqa: E402
from domain.user.services.user_service import UserDomainService  # noqa: E402
from infrastructure.clock import SystemClock  # noqa: E402
from infrastructure.config import (  # noqa: E402
    get_app_env,
    get_app_version,
    get_cors_allowed_origins,
    get_repository_backend,
)
from infrastructure.persistence.factory import (  # noqa: E402
    get_meal_repository,
    get_user_repository,
)
from infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher  # noqa: E402
from infrastructure.security.jwt_service import JwtService  # noqa: E402

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

logger = _logging.getLogger("startup")

APP_VERSION = get_app_version()

_clock = SystemClock()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Fail fast on bad persistence or token configuration.
    get_user_repository()
    get_meal_repository()
    JwtService.from_env()

    logger.info(
        "lifespan.ready",
        extra={
            "env": get_app_env(),
            "version": APP_VERSION,
            "repository_backend": get_repository_backend(),
        },
    )
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="Kapp Cafeteria Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


# ============================================
# GraphQL Context Setup
# ============================================


def get_graphql_context(request: Request) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Repositories are process-wide singletons selected by REPOSITORY_BACKEND;
    the services around them are stateless and built per request.
    """
    return create_context(
        user_service=UserDomainService(
            get_user_repository(),
            BcryptPasswordHasher.from_env(),
            clock=_clock,
        ),
        meal_service=MealDomainService(get_meal_repository(), _clock),
        jwt_service=JwtService.from_env(),
        request=request,
    )


schema = create_schema()

graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
