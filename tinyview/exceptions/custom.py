"""
Custom Exception Classes
View-layer exceptions carrying an HTTP status code
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all view-layer exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class InvalidArgumentException(FrameworkException):
    """
    Invalid argument exception

    Raised when a view is used in a way it does not support: calling a
    helper nobody registered, rendering without a template path, asking
    for an unknown template engine.

    Example:
        raise InvalidArgumentException('Template file path is empty.')
    """
    status_code = 500
    message = "Invalid argument"
