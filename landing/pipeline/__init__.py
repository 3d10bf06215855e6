"""Content pipeline orchestration.

validate_and_normalize() is the boundary the rest of the application calls;
collaborators never invoke the validator, normalizer or fingerprinter directly.
"""

from .models import ValidationResult
from .runner import ContentPipeline, validate_and_normalize

__all__ = ["ContentPipeline", "ValidationResult", "validate_and_normalize"]
