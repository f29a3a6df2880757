"""Service layer for the upload workflow."""

from .filter_service import DEFAULT_FILTER_RULES, FilterService
from .ignore_service import DEFAULT_IGNORE_PATTERNS, IgnoreFileService
from .repository_service import RepositoryService
from .upload_service import UploadService

__all__ = [
    "DEFAULT_FILTER_RULES",
    "DEFAULT_IGNORE_PATTERNS",
    "FilterService",
    "IgnoreFileService",
    "RepositoryService",
    "UploadService",
]
