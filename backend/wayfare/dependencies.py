import uuid

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wayfare.config import settings
from wayfare.database import get_db
from wayfare.errors import UnauthorizedError
from wayfare.models.user import User
from wayfare.services.catalog_store import BUNDLED_CATALOGS, Catalogs, sql_catalogs

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    if credentials is None:
        raise UnauthorizedError("Not authorized to access this route")

    try:
        payload = jwt.decode(credentials.credentials, settings.secret_key, algorithms=[settings.algorithm])
        user_id = uuid.UUID(str(payload.get("sub", "")))
    except (JWTError, ValueError):
        raise UnauthorizedError("Invalid or expired token")

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if not user or not user.is_active:
        raise UnauthorizedError("User not found or inactive")
    return user


async def get_catalogs(db: AsyncSession = Depends(get_db)) -> Catalogs:
    if settings.catalog_backend == "database":
        return sql_catalogs(db)
    return BUNDLED_CATALOGS
