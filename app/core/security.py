# ===========================================================================
# File: app/core/security.py
# ===========================================================================
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union
from jose import jwt

from app.core.config import settings

DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24 * 7

def create_access_token(subject: Union[str, Any], user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Membuat JWT yang dikenali oleh service ini. Di produksi token diterbitkan oleh
    auth service platform; fungsi ini dipakai untuk tooling dan test.
    """
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"exp": expire, "sub": str(subject), "user_id": str(user_id), "iat": datetime.now(timezone.utc)}
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt

def decode_access_token(token: str) -> Dict[str, Any]:
    # Raises JWTError (incl. ExpiredSignatureError) on bad tokens
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
