"""Library domain - file enumeration and the track catalog."""

from .catalog import Catalog
from .models import TrackDescriptor
from .scanner import DirectoryError, is_supported_format, list_regular_files, validate_directory

__all__ = [
    "Catalog",
    "TrackDescriptor",
    "DirectoryError",
    "is_supported_format",
    "list_regular_files",
    "validate_directory",
]
