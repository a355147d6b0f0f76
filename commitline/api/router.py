from fastapi import APIRouter

from commitline.api.v1 import (
    commits,
    repositories,
    share,
)

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(repositories.router)
api_router.include_router(commits.router)
api_router.include_router(share.router)
