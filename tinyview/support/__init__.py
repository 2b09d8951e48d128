"""
Framework Support Classes
"""

from tinyview.support.config import Config, ConfigObject

__all__ = [
    'Config',
    'ConfigObject',
]
