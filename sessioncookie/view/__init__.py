"""
Views
"""
from sessioncookie.view.home import render_home

__all__ = [
    'render_home',
]
