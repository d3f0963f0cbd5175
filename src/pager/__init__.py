"""Page Calculation and Navigation Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Offset/limit pagination and page-navigation rendering for paged listings"
)

__all__ = ["config", "models", "paging", "rendering", "utils"]
