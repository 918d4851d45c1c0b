"""
Recursive sanitizer.

Walks an input value graph using the classifier and a traversal context and
produces its immutable mirror. Orchestrates the pipeline:
Classify → Track → Recurse → Construct.
"""

import traceback
from pathlib import Path as FilePath
from typing import Any, Callable, NoReturn, Optional

import structlog

from ..config.defaults import SanitizerParams
from ..config.loader import ConfigLoader
from ..containers.base import OMITTED
from ..containers.failure import StoicFailure
from ..containers.record import StoicRecord
from ..containers.sequence import StoicSequence
from ..errors import TraversalDepthError, UnsupportedTypeError
from ..logging.config import (
    configure_logging_from,
    get_diagnostics_logger,
    log_cycle_detected,
    log_value_rejected,
)
from .classifier import (
    PASSTHROUGH_KINDS,
    Kind,
    classify,
    record_items,
    to_primitive,
    unsupported_reason,
)
from .tracker import CycleDetected, Path, TraversalContext

logger = structlog.get_logger(__name__)

CycleCallback = Callable[[CycleDetected], None]


class Sanitizer:
    """
    Builds deeply immutable mirrors of arbitrary value graphs.

    A Sanitizer holds configuration only; every ``create`` call gets its own
    traversal context, so one instance can be shared between threads.
    """

    def __init__(self, params: Optional[SanitizerParams] = None,
                 on_cycle: Optional[CycleCallback] = None) -> None:
        self.params = params or SanitizerParams()
        self.on_cycle = on_cycle
        self.logger = logger
        self.diagnostics_logger = get_diagnostics_logger(__name__)

    @classmethod
    def from_config(cls, config_dir: Optional[FilePath] = None,
                    overrides: Optional[dict[str, Any]] = None,
                    on_cycle: Optional[CycleCallback] = None,
                    setup_logging: bool = False) -> "Sanitizer":
        """
        Create a Sanitizer from stoic.yaml and call-site overrides.

        Args:
            config_dir: Directory holding stoic.yaml (default: working directory)
            overrides: Sanitizer parameters that take precedence over the file
            on_cycle: Callback receiving CycleDetected events
            setup_logging: Also apply the file's ``logging`` section to structlog
        """
        loader = ConfigLoader.create(config_dir)
        config = loader.load({"sanitizer": overrides} if overrides else None)

        if setup_logging:
            configure_logging_from(config.logging)

        return cls(params=config.sanitizer, on_cycle=on_cycle)

    def create(self, value: Any, path: Path = ()) -> Any:
        """
        Produce the immutable mirror of ``value``.

        Args:
            value: Any supported value graph
            path: Path prefix reported in diagnostics and errors

        Returns:
            A primitive, OMITTED, or a StoicRecord / StoicSequence / StoicFailure

        Raises:
            UnsupportedTypeError: A value anywhere in the graph cannot be represented
            TraversalDepthError: The graph is nested deeper than the traversal allows
        """
        context = TraversalContext()
        try:
            return self._sanitize(value, tuple(path), context)
        except RecursionError as e:
            if isinstance(e, TraversalDepthError):
                raise
            self.logger.error(
                "Traversal exceeded interpreter recursion limit",
                visited=len(context)
            )
            raise TraversalDepthError(
                "Value graph is nested too deeply to sanitize",
                context={"visited": len(context)}
            ) from e

    def _sanitize(self, value: Any, path: Path, context: TraversalContext) -> Any:
        kind = classify(value)

        if kind in PASSTHROUGH_KINDS:
            return value

        if kind is Kind.CONVERTIBLE:
            return to_primitive(value)

        if kind is Kind.UNSUPPORTED:
            self._reject(value, unsupported_reason(value), path)

        max_depth = self.params.max_depth
        if max_depth is not None and len(path) > max_depth:
            raise TraversalDepthError(
                f"Value graph exceeds max_depth={max_depth} at {list(path)}",
                path=path,
                limit=max_depth,
            )

        original_path = context.visit(value, path)
        if original_path is not None:
            self._report_cycle(path, original_path)
            return OMITTED

        if kind is Kind.SEQUENCE:
            return StoicSequence._from_sanitized(
                self._sanitize(element, path + (index,), context)
                for index, element in enumerate(value)
            )

        if kind is Kind.FAILURE:
            return self._sanitize_failure(value, path, context)

        return StoicRecord._from_sanitized(
            (self._sanitize_key(key, path + (key,)),
             self._sanitize(field_value, path + (key,), context))
            for key, field_value in record_items(value)
        )

    def _sanitize_key(self, key: Any, path: Path) -> Any:
        """Record keys must already be immutable; tuples are checked member-wise."""
        kind = classify(key)

        if kind in PASSTHROUGH_KINDS:
            return key

        if isinstance(key, tuple):
            return tuple(self._sanitize_key(part, path) for part in key)

        if kind is Kind.UNSUPPORTED:
            reason = unsupported_reason(key)
        else:
            reason = f"{kind.value} value cannot be a record key"
        self._reject(key, reason, path)

    def _reject(self, value: Any, reason: str, path: Path) -> NoReturn:
        type_name = type(value).__name__
        log_value_rejected(self.diagnostics_logger, type_name, reason, path)
        raise UnsupportedTypeError(
            f"Cannot sanitize {type_name} at {list(path)}: {reason}",
            type_name=type_name,
            reason=reason,
            path=path,
        )

    def _sanitize_failure(self, error: BaseException, path: Path,
                          context: TraversalContext) -> StoicFailure:
        cause = error.__cause__
        if cause is None and not error.__suppress_context__:
            cause = error.__context__

        trace = ""
        if self.params.include_trace:
            trace = "".join(traceback.format_exception(
                type(error), error, error.__traceback__, chain=False
            ))

        return StoicFailure._from_parts(
            name=f"{self.params.failure_name_prefix}{type(error).__name__}",
            message=str(error),
            trace=trace,
            cause=self._sanitize(cause, path + ("cause",), context),
        )

    def _report_cycle(self, current_path: Path, original_path: Path) -> None:
        event = CycleDetected(current_path=current_path, original_path=original_path)

        if self.params.log_cycles:
            log_cycle_detected(self.diagnostics_logger, current_path, original_path)

        if self.on_cycle is not None:
            self.on_cycle(event)


def create(value: Any, on_cycle: Optional[CycleCallback] = None,
           params: Optional[SanitizerParams] = None) -> Any:
    """Sanitize ``value`` with a one-off Sanitizer."""
    return Sanitizer(params=params, on_cycle=on_cycle).create(value)
