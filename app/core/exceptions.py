# ===========================================================================
# File: app/core/exceptions.py
# ===========================================================================
from typing import Any, Dict, List, Optional
from fastapi import HTTPException, status as HttpStatus


class NewsApiError(HTTPException):
    """Base class for errors that carry a machine readable `error` kind."""

    error: str = "InternalError"
    status_code_default: int = HttpStatus.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(
            status_code=self.status_code_default,
            detail=detail or self.error,
            headers=headers,
        )

    def to_content(self) -> Dict[str, Any]:
        return {"error": self.error, "detail": self.detail}


class ValidationFailed(NewsApiError):
    error = "ValidationFailed"
    status_code_default = HttpStatus.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[Dict[str, Any]], detail: str = "Invalid request parameters."):
        super().__init__(detail=detail)
        self.errors = errors

    def to_content(self) -> Dict[str, Any]:
        content = super().to_content()
        content["errors"] = self.errors
        return content


class PostIdRequired(ValidationFailed):
    error = "PostIdRequired"

    def __init__(self):
        super().__init__(
            errors=[{"loc": ["path", "postId"], "msg": "postId is required", "type": "missing"}],
            detail="postId is required.",
        )


class NotFound(NewsApiError):
    error = "NotFound"
    status_code_default = HttpStatus.HTTP_404_NOT_FOUND


class Forbidden(NewsApiError):
    error = "Forbidden"
    status_code_default = HttpStatus.HTTP_403_FORBIDDEN
