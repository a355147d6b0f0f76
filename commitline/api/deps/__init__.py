"""API dependencies - re-exports from submodules."""

from .auth import (
    GitHub,
    get_github_service,
    get_github_token,
    security,
)

__all__ = [
    "security",
    "get_github_token",
    "get_github_service",
    "GitHub",
]
