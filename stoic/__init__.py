"""
Stoic - Deep Immutability Engine

Turns an arbitrary mutable value graph (mappings, plain data objects,
sequences, exceptions, primitives) into a structurally equivalent mirror
that cannot be mutated through any reference. Circular and shared
references are replaced by an explicit omitted marker and reported as
diagnostic events.
"""

from .containers import (
    OMITTED,
    StoicFailure,
    StoicRecord,
    StoicSequence,
    StoicValue,
)
from .core.classifier import Kind, classify
from .core.sanitizer import Sanitizer, create
from .core.tracker import CycleDetected
from .errors import (
    ConfigurationError,
    InvalidArgumentError,
    MutationError,
    StoicError,
    TraversalDepthError,
    UnsupportedTypeError,
)

__version__ = "0.1.0"
__author__ = "Stoic Team"

__all__ = [
    "create",
    "classify",
    "Kind",
    "Sanitizer",
    "CycleDetected",
    "OMITTED",
    "StoicValue",
    "StoicRecord",
    "StoicSequence",
    "StoicFailure",
    "StoicError",
    "InvalidArgumentError",
    "UnsupportedTypeError",
    "MutationError",
    "TraversalDepthError",
    "ConfigurationError",
]
