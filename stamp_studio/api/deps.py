"""FastAPI dependencies for dependency injection.

Provides:
- Database session (one transaction per request)
- Caller identity from the gateway-forwarded user header
- Role guards
- Services wired to the request's stores
"""

from typing import Annotated, AsyncGenerator, Awaitable, Callable

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from stamp_studio.domain.lifecycle import Role
from stamp_studio.domain.policy import REVIEWER_ROLES, Caller, require_role
from stamp_studio.infra.database import get_db_session
from stamp_studio.infra.logging import bind_request_context, get_logger
from stamp_studio.repositories import (
    SqlDesignStore,
    SqlProductStore,
    SqlReviewStore,
    SqlUserStore,
)
from stamp_studio.services import (
    DesignService,
    ProductService,
    ReviewService,
    TechnicalSheetGenerator,
)

logger = get_logger(__name__)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session scoped to the request.

    Yields:
        AsyncSession committed when the request succeeds
    """
    async with get_db_session() as session:
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db)]


async def get_current_caller(
    db: DbSession,
    x_user_id: Annotated[int | None, Header()] = None,
) -> Caller:
    """Resolve the authenticated caller.

    Token verification happens at the gateway, which forwards the user id
    in ``X-User-Id``. The role is always read from the database.

    Raises:
        HTTPException: 401 if the header is missing or the user is unknown
    """
    if x_user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header",
        )

    user = await SqlUserStore(db).find_by_id(x_user_id)
    if user is None:
        logger.warning("Unknown caller", user_id=x_user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    bind_request_context(user_id=user.id, role=user.role.value)
    return Caller(user_id=user.id, role=user.role)


CurrentCaller = Annotated[Caller, Depends(get_current_caller)]


def require_roles(*roles: Role) -> Callable[[Caller], Awaitable[Caller]]:
    """Build a dependency that only lets callers with one of ``roles`` through."""

    async def dependency(caller: CurrentCaller) -> Caller:
        require_role(caller, roles)
        return caller

    return dependency


ReviewerCaller = Annotated[Caller, Depends(require_roles(*REVIEWER_ROLES))]
AdminCaller = Annotated[Caller, Depends(require_roles(Role.ADMIN))]


def get_design_service(db: DbSession) -> DesignService:
    return DesignService(SqlDesignStore(db), SqlProductStore(db))


def get_review_service(db: DbSession) -> ReviewService:
    return ReviewService(SqlReviewStore(db), SqlDesignStore(db))


def get_sheet_generator(db: DbSession) -> TechnicalSheetGenerator:
    return TechnicalSheetGenerator(SqlDesignStore(db), SqlReviewStore(db))


def get_product_service(db: DbSession) -> ProductService:
    return ProductService(SqlProductStore(db))


# Type aliases for cleaner annotations
Designs = Annotated[DesignService, Depends(get_design_service)]
Reviews = Annotated[ReviewService, Depends(get_review_service)]
Sheets = Annotated[TechnicalSheetGenerator, Depends(get_sheet_generator)]
Products = Annotated[ProductService, Depends(get_product_service)]
