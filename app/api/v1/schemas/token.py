# ===========================================================================
# File: app/api/v1/schemas/token.py
# ===========================================================================
from pydantic import BaseModel

class TokenData(BaseModel): # Untuk validasi payload JWT internal
    sub: str # Subject dari JWT, berisi username
    user_id: str
