"""
Console Package
"""
from sessioncookie.console.artisan import Artisan, main
from sessioncookie.console.command import Command

__all__ = [
    'Artisan',
    'Command',
    'main',
]
