"""
User endpoints - registration and login. Login issues the bearer token whose
subject is the caller identity for every auction mutation.
"""

from fastapi import APIRouter, HTTPException, status

from auction_ledger.db.models.user import User
from auction_ledger.db.session import WriteSession, DbSession
from auction_ledger.db.repositories.user_repository import UserRepository
from auction_ledger.schemas.user import LoginRequest, TokenResponse, UserCreate, UserResponse
from auction_ledger.core.security import hash_password, create_access_token, verify_password

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(session: WriteSession, data: UserCreate):
    """Create new user. Returns user without password."""
    repo = UserRepository(session)
    if await repo.get_by_email(data.email):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )
    user = await repo.add(
        User(
            email=data.email,
            hashed_password=hash_password(data.password),
            full_name=data.full_name,
        )
    )
    await session.refresh(user)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
async def login(session: DbSession, data: LoginRequest):
    """Authenticate and return JWT."""
    user = await UserRepository(session).get_by_email(data.email)
    if not user or not verify_password(data.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    return TokenResponse(access_token=create_access_token(user.id), user_id=user.id)
