# ===========================================================================
# File: app/api/v1/endpoints/users.py
# ===========================================================================
from fastapi import APIRouter, Depends

from app.api.deps import get_current_active_user
from app.models.user import UserInDB
from app.api.v1.schemas.user import UserPublic
from app.core.config import logger

router = APIRouter()

@router.get("/me", response_model=UserPublic, summary="Get Current User Profile")
async def read_current_user_me(
    current_user_from_dep: UserInDB = Depends(get_current_active_user)
):
    logger.info(f"Fetching profile for user: {current_user_from_dep.username}")
    return UserPublic.model_validate(current_user_from_dep)
