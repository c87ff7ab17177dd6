# ===========================================================================
# File: app/api/deps.py
# ===========================================================================
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from fastapi import Depends, HTTPException, status as HttpStatus
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from pydantic import ValidationError

from app.db.session import get_db
from app.core.config import settings, logger
from app.core.exceptions import Forbidden
from app.core.security import decode_access_token
from app.models.user import UserInDB
from app.models.base import parse_object_id
from app.crud.crud_user import crud_user
from app.api.v1.schemas.token import TokenData as TokenDataSchema

# Token diterbitkan oleh auth service platform, di sini hanya diverifikasi
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/token")
oauth2_scheme_optional = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/token", auto_error=False)

async def _resolve_user_from_token(db: AsyncIOMotorDatabase, token: str) -> Optional[UserInDB]:
    try:
        payload = decode_access_token(token)
        token_data = TokenDataSchema.model_validate(payload)
    except JWTError as e:
        logger.warning(f"JWT Error during token decode: {e}")
        return None
    except ValidationError as e:
        logger.warning(f"JWT Payload Validation Error (TokenDataSchema): {e}")
        return None

    user_object_id = parse_object_id(token_data.user_id)
    if user_object_id is None:
        logger.error(f"Invalid ObjectId string in JWT user_id: {token_data.user_id}")
        return None

    user = await crud_user.get(db, id=user_object_id)
    if user is None:
        logger.warning(f"User with ID {token_data.user_id} not found in DB (from JWT).")
        return None
    if user.username != token_data.sub:
        logger.error(f"Username mismatch for user ID {token_data.user_id}. DB: {user.username}, JWT sub: {token_data.sub}")
        return None
    return user

async def get_current_active_user(
    db: AsyncIOMotorDatabase = Depends(get_db),
    token: str = Depends(oauth2_scheme)
) -> UserInDB:
    user = await _resolve_user_from_token(db, token)
    if user is None:
        raise HTTPException(
            status_code=HttpStatus.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.is_active:
        logger.warning(f"User {user.username} (ID: {user.id}) is inactive. Request denied.")
        raise HTTPException(status_code=HttpStatus.HTTP_400_BAD_REQUEST, detail="Inactive user")
    return user

async def get_current_user_optional(
    db: AsyncIOMotorDatabase = Depends(get_db),
    token: Optional[str] = Depends(oauth2_scheme_optional)
) -> Optional[UserInDB]:
    """Anonymous callers (no token, bad token, inactive user) resolve to None."""
    if not token:
        return None
    user = await _resolve_user_from_token(db, token)
    if user is None or not user.is_active:
        return None
    return user

async def get_current_active_admin_user(
    current_user: UserInDB = Depends(get_current_active_user)
) -> UserInDB:
    if not current_user.is_contributor_admin:
        logger.warning(f"User {current_user.username} attempted an admin-only news operation.")
        raise Forbidden("You don't have admin access.")
    return current_user
