"""
Custom exception classes for diagnostic handlers.
Provides structured error handling across all handlers.
"""


class DiagnosticsException(Exception):
    """Base exception for all diagnostic operations"""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationException(DiagnosticsException):
    """Raised when billing configuration cannot be loaded or read"""

    pass


class LoggerException(DiagnosticsException):
    """Raised when the structured logging sink cannot be acquired or written"""

    pass


class UnauthorizedException(DiagnosticsException):
    """Raised when a request carries no authenticated caller identity"""

    pass
