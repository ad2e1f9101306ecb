"""
SCRIPTURA - Core Module

Provides foundational pieces shared by every other module:
- Unified error handling and the reference error taxonomy
- Type definitions

Each component here is free of dependencies on other SCRIPTURA modules,
making it the stable foundation everything else builds upon.

Usage:
    from core import ReferenceErrorKind, ScripturaDataError
"""

from core.errors import (
    ErrorContext,
    ErrorSeverity,
    InvalidReferenceError,
    ReferenceErrorKind,
    ScripturaConfigError,
    ScripturaDataError,
    ScripturaError,
    ScripturaValidationError,
)
from core.types import (
    BookEntryDict,
    BookName,
    NormalizedKey,
    RawSplit,
    ReferenceResult,
    StructuredReferenceResult,
)

__all__ = [
    # Errors
    "ErrorContext",
    "ErrorSeverity",
    "InvalidReferenceError",
    "ReferenceErrorKind",
    "ScripturaConfigError",
    "ScripturaDataError",
    "ScripturaError",
    "ScripturaValidationError",
    # Types
    "BookEntryDict",
    "BookName",
    "NormalizedKey",
    "RawSplit",
    "ReferenceResult",
    "StructuredReferenceResult",
]
