from commitline.api.v1 import (
    commits,
    repositories,
    share,
)

__all__ = [
    "commits",
    "repositories",
    "share",
]
