"""Content contract validation.

This module provides:
- ContentValidator: checks raw JSON and reports errors and warnings
- ValidationReport: errors, warnings and the typed RawContent view
- read_raw_content: JSON to RawContent conversion with type checking
- Issue codes and length limits of the content contract
"""

from .errors import create_error, create_warning
from .models import ValidationReport
from .reader import read_raw_content
from .rules import CONTENT_CONTRACT_VERSION, LengthLimit
from .service import ContentValidator

__all__ = [
    "ContentValidator",
    "ValidationReport",
    "read_raw_content",
    "create_error",
    "create_warning",
    "CONTENT_CONTRACT_VERSION",
    "LengthLimit",
]
