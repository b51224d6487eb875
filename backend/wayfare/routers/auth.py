from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, HTTPException
from jose import jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wayfare.config import settings
from wayfare.database import get_db
from wayfare.dependencies import get_current_user
from wayfare.errors import UnauthorizedError, ValidationError
from wayfare.models.user import User
from wayfare.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse

router = APIRouter()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def create_access_token(user_id: str) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    payload = {"sub": user_id, "exp": expire}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def _auth_envelope(user: User) -> dict:
    auth = AuthResponse(token=create_access_token(str(user.id)), user=UserResponse.model_validate(user))
    return {"status": "success", "data": auth.model_dump(mode="json", by_alias=True)}


@router.post("/register", status_code=201)
async def register(req: RegisterRequest, db: AsyncSession = Depends(get_db)):
    email = req.email.lower()
    result = await db.execute(select(User).where(User.email == email))
    if result.scalar_one_or_none():
        raise ValidationError.for_field("email", "Email already registered")

    user = User(
        email=email,
        password_hash=pwd_context.hash(req.password),
        first_name=req.first_name,
        last_name=req.last_name,
        phone=req.phone,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)

    return _auth_envelope(user)


@router.post("/login")
async def login(req: LoginRequest, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(User).where(User.email == req.email.lower()))
    user = result.scalar_one_or_none()

    if not user or not pwd_context.verify(req.password, user.password_hash):
        raise UnauthorizedError("Invalid email or password")

    if not user.is_active:
        raise HTTPException(status_code=403, detail="Account is disabled")

    return _auth_envelope(user)


@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    return {"status": "success", "data": {"user": UserResponse.model_validate(user).model_dump(mode="json", by_alias=True)}}
