from fastapi import HTTPException, status

from commitline.services.github.types import RateLimited


class ValidationError(HTTPException):
    """Raised when request validation fails."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
        )


class UnauthorizedError(HTTPException):
    """Raised when the request carries no usable GitHub token."""

    def __init__(self, message: str = "GitHub token required"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=message,
            headers={"WWW-Authenticate": "Bearer"},
        )


class RateLimitExceededError(HTTPException):
    """Raised when GitHub reported the user's rate limit as exhausted."""

    def __init__(self, rate_limited: RateLimited):
        super().__init__(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail={
                "message": rate_limited.message,
                "retry_after_minutes": rate_limited.retry_after_minutes,
            },
            headers={"Retry-After": str(rate_limited.retry_after_minutes * 60)},
        )
