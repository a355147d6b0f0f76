# Services package
#
# Share encoding lives in commitline.services.share and is imported from there
# directly; it depends on commitline.schemas, which depends on this package.

from commitline.services.github import GitHubService
from commitline.services.metrics import build_cumulative_series, compute_velocity

__all__ = [
    # GitHub access
    "GitHubService",
    # Metrics
    "build_cumulative_series",
    "compute_velocity",
]
