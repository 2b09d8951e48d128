"""
HTTP Package
"""
from tinyview.http.response import render_view

__all__ = [
    'render_view',
]
