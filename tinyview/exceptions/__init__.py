"""
Exceptions Package
"""
from tinyview.exceptions.custom import (
    FrameworkException,
    InvalidArgumentException,
)

__all__ = [
    'FrameworkException',
    'InvalidArgumentException',
]
