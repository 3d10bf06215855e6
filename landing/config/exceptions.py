"""Custom exceptions for configuration management."""

from typing import Iterable, List, Optional


class ConfigurationError(Exception):
    """Raised when the config file or environment fails validation.

    Carries every problem found plus suggestions, rendered as one message.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[Iterable[str]] = None,
        suggestions: Optional[Iterable[str]] = None,
    ):
        self.message = message
        self.errors: List[str] = list(errors or [])
        self.suggestions: List[str] = list(suggestions or [])
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        lines = [self.message]
        if self.errors:
            lines.append("\nValidation Errors:")
            lines.extend(f"  {index}. {error}" for index, error in enumerate(self.errors, 1))
        if self.suggestions:
            lines.append("\nSuggestions:")
            lines.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self._format_message()
