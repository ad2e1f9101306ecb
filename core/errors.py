"""
SCRIPTURA - Unified Error Handling

Provides the error hierarchy used across the system and the taxonomy of
user-facing reference errors.

Features:
- Hierarchical exception classes with context preservation
- Error severity levels for prioritized handling
- Structured error context for debugging
- Reference error kinds mapped to stable user-facing messages

Parsing, lookup and validation never raise: they signal absence with None
or False. Exceptions are reserved for dataset loading at startup and for
the strict resolution helper.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorSeverity(Enum):
    """Error severity levels for prioritized handling."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ReferenceErrorKind(str, Enum):
    """Reasons a reference string can be rejected, in check order."""

    EMPTY_INPUT = "empty_input"
    UNPARSABLE_REFERENCE = "unparsable_reference"
    UNKNOWN_BOOK = "unknown_book"
    INCOMPLETE_REFERENCE = "incomplete_reference"
    OUT_OF_RANGE = "out_of_range"

    @property
    def message(self) -> str:
        """User-facing message reported in result envelopes."""
        return _REFERENCE_ERROR_MESSAGES[self]


_REFERENCE_ERROR_MESSAGES: Dict[ReferenceErrorKind, str] = {
    ReferenceErrorKind.EMPTY_INPUT: "Empty or invalid input",
    ReferenceErrorKind.UNPARSABLE_REFERENCE: "Could not parse reference",
    ReferenceErrorKind.UNKNOWN_BOOK: "Invalid book name",
    ReferenceErrorKind.INCOMPLETE_REFERENCE: "Missing chapter or verse",
    ReferenceErrorKind.OUT_OF_RANGE: "Invalid chapter or verse",
}


@dataclass
class ErrorContext:
    """Structured context for error debugging."""

    operation: str
    component: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    reference: Optional[str] = None
    source: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary for serialization."""
        return {
            "operation": self.operation,
            "component": self.component,
            "timestamp": self.timestamp.isoformat(),
            "reference": self.reference,
            "source": self.source,
            "metadata": self.metadata,
        }


class ScripturaError(Exception):
    """
    Base exception for all SCRIPTURA-specific errors.

    Provides:
    - Structured error context
    - Severity level
    - Chained exception support
    """

    default_severity: ErrorSeverity = ErrorSeverity.ERROR
    error_code: str = "SCRIPTURA_ERROR"

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        severity: Optional[ErrorSeverity] = None,
        cause: Optional[Exception] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context
        self.severity = severity or self.default_severity
        self.cause = cause
        self.suggestions = suggestions or []
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "severity": self.severity.value,
            "suggestions": self.suggestions,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context.to_dict() if self.context else None,
            "cause": str(self.cause) if self.cause else None,
        }

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f" (component: {self.context.component})")
        if self.cause:
            parts.append(f" [caused by: {self.cause}]")
        return "".join(parts)

    def with_context(self, **kwargs: Any) -> "ScripturaError":
        """Add additional context to the error."""
        if self.context:
            self.context.metadata.update(kwargs)
        else:
            self.context = ErrorContext(
                operation="unknown",
                component="unknown",
                metadata=kwargs
            )
        return self


class ScripturaConfigError(ScripturaError):
    """Configuration-related errors."""

    error_code = "CONFIG_ERROR"
    default_severity = ErrorSeverity.CRITICAL

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        actual_value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.config_key = config_key
        self.actual_value = actual_value


class ScripturaDataError(ScripturaError):
    """The book dataset is missing, malformed or inconsistent."""

    error_code = "DATA_ERROR"
    default_severity = ErrorSeverity.CRITICAL

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        entry_index: Optional[int] = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.path = path
        self.entry_index = entry_index


class ScripturaValidationError(ScripturaError):
    """Data validation errors."""

    error_code = "VALIDATION_ERROR"
    default_severity = ErrorSeverity.WARNING

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        actual_value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.actual_value = actual_value


class InvalidReferenceError(ScripturaValidationError):
    """A reference string was rejected by strict resolution."""

    error_code = "INVALID_REFERENCE"

    def __init__(
        self,
        kind: ReferenceErrorKind,
        reference: Any = None,
        **kwargs: Any,
    ):
        super().__init__(
            kind.message,
            field_name="reference",
            actual_value=reference,
            **kwargs,
        )
        self.kind = kind
        self.reference = reference
