"""
Built-in Commands
"""
from sessioncookie.console.commands.generate_secret_command import GenerateSecretCommand
from sessioncookie.console.commands.serve_command import ServeCommand

__all__ = [
    'GenerateSecretCommand',
    'ServeCommand',
]
