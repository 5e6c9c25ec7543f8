"""
Base View-Model

UI-signal fields shared by every view-model.
"""

from .main_context import MainContext


class BaseViewModel:
    """Error and alert state, written only on the main context."""

    def __init__(self, main_context: MainContext):
        self.main_context = main_context
        self.has_error = False
        self.show_alert = False
        self.error_message = ""

    def dismiss_alert(self) -> None:
        self.show_alert = False

    def _report_error(self, error: Exception) -> None:
        self.has_error = True
        self.show_alert = True
        self.error_message = str(error)

    def _clear_error(self) -> None:
        self.has_error = False
        self.error_message = ""
