"""Error types for catalog retrieval and texture synthesis."""

from typing import Optional


class ExoqueryError(Exception):
    """Base exception for exoquery-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class FetchError(ExoqueryError):
    """Raised when the body catalog cannot be retrieved or parsed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        message = f"Could not fetch body catalog from {url}: {reason}"
        suggestions = [
            "Check network connectivity to the catalog API",
            "Override the endpoint with EXOQUERY_CATALOG_URL if it has moved",
        ]
        super().__init__(message, suggestions)


class InvalidBodyRecordError(FetchError):
    """Raised when a catalog record cannot be turned into a body."""

    def __init__(self, url: str, reason: str):
        super().__init__(url, f"invalid body record ({reason})")


class AssetLoadError(ExoqueryError):
    """Raised when a texture asset cannot be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        message = f"Could not load texture asset '{path}': {reason}"
        suggestions = [
            "Check that the texture files exist under the configured asset root",
            "Set EXOQUERY_ASSET_ROOT to the directory holding the textures",
        ]
        super().__init__(message, suggestions)


class FallbackLoadError(AssetLoadError):
    """Raised when the fallback texture also fails to load."""

    def __init__(self, path: str, primary_error: Optional[AssetLoadError] = None):
        self.primary_error = primary_error
        reason = "fallback texture unavailable"
        if primary_error is not None:
            reason += f" after primary '{primary_error.path}' failed"
        super().__init__(path, reason)
