"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ConfigurationError(AppError):
    """Raised when the widget cannot work out what to quote."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")


class QuoteUnavailableError(AppError):
    """
    Raised when every quote source for a symbol has been exhausted.

    Carries what the status bar should show: a short message, the color to
    show it in, and the process exit code. Only an unexpected HTTP status
    exits non-zero; everything else is reported as a status line.
    """

    def __init__(
        self,
        message: str,
        color: str = "gray",
        exit_code: int = 0,
        code: str = "QUOTE_UNAVAILABLE",
    ):
        self.color = color
        self.exit_code = exit_code
        super().__init__(message, code=code)
