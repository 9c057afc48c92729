"""Core ancestryplot pipeline primitives.

This package loads precomputed PCA coordinates and per-population styles,
joins and orders them, and renders layered ancestry charts.
"""

from .config import PRIMARY_SCHEMA, STYLE_SCHEMA, Delimiter, TableSchema
from .errors import (
    AestheticError,
    AncestryPlotError,
    JoinKeyMismatchError,
    MissingAestheticError,
    ParseError,
    ProfileError,
)
from .join import left_join
from .loaders import CategoryStyleLoader, ObservationLoader, TableLoader
from .lookup import AestheticLookup, build_lookup
from .models import CategoryStyle, JoinedRecord, Observation
from .ordering import CategoryOrder, assign_order, sort_by_rank
from .pipeline import AncestryPlotPipeline, PlotRunReport, PreparedTable
from .profiles import ChartProfile, ChartProfileLoader
from .quality import KeyCoverage, check_join_keys
from .render import ChartRenderer, RenderSummary
from .transforms import flip_sign, partition

__all__ = [
    "AestheticError",
    "AestheticLookup",
    "AncestryPlotError",
    "AncestryPlotPipeline",
    "CategoryOrder",
    "CategoryStyle",
    "CategoryStyleLoader",
    "ChartProfile",
    "ChartProfileLoader",
    "ChartRenderer",
    "Delimiter",
    "JoinKeyMismatchError",
    "JoinedRecord",
    "KeyCoverage",
    "MissingAestheticError",
    "Observation",
    "ObservationLoader",
    "PRIMARY_SCHEMA",
    "ParseError",
    "PlotRunReport",
    "PreparedTable",
    "ProfileError",
    "RenderSummary",
    "STYLE_SCHEMA",
    "TableLoader",
    "TableSchema",
    "assign_order",
    "build_lookup",
    "check_join_keys",
    "flip_sign",
    "left_join",
    "partition",
    "sort_by_rank",
]
