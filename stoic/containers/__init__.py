"""
Immutable container variants.

StoicRecord, StoicSequence and StoicFailure are the three frozen shapes the
sanitizer produces. OMITTED marks positions where a circular or repeated
reference was dropped.
"""

from .base import OMITTED, StoicValue
from .failure import StoicFailure
from .record import StoicRecord
from .sequence import StoicSequence
from .views import VIEW_OPERATIONS, ViewOperation, ViewStrategy

__all__ = [
    "OMITTED",
    "StoicValue",
    "StoicRecord",
    "StoicSequence",
    "StoicFailure",
    "VIEW_OPERATIONS",
    "ViewOperation",
    "ViewStrategy",
]
