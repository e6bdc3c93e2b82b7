"""Shared service state for the web application."""

from typing import Optional

from bunseki import TextAnalysisService


class AppState:
    """Global application state holding the analysis service."""

    def __init__(self, service: Optional[TextAnalysisService] = None):
        """
        Initialize application state.

        Args:
            service: Service to use. Created from environment settings on
                     first access when None.
        """
        self._service = service

    @property
    def service(self) -> TextAnalysisService:
        if self._service is None:
            self._service = TextAnalysisService()
        return self._service

    def use(self, service: TextAnalysisService) -> None:
        """Replace the service (used by tests and embedding applications)."""
        self._service = service


# Global instance
app_state = AppState()
