"""Input loaders for ancestryplot."""

from .base import TableLoader
from .common import read_text_frame, resolve_delimiter
from .observations import ObservationLoader
from .styles import CategoryStyleLoader

__all__ = [
    "TableLoader",
    "ObservationLoader",
    "CategoryStyleLoader",
    "read_text_frame",
    "resolve_delimiter",
]
