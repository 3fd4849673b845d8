"""
Base Command Class
Base class for sessioncookie CLI commands
"""
from abc import ABC, abstractmethod
from typing import Optional


class Command(ABC):

    # Command name (e.g., "serve", "secret:generate")
    name: str = ""

    # Command description
    description: str = ""

    # Command signature (for help display)
    signature: Optional[str] = None

    def __init__(self):
        if not self.signature:
            self.signature = self.name

    @abstractmethod
    def handle(self, *args, **kwargs):
        """
        Execute the command logic (may be a coroutine)

        Returns:
            int: Exit code (0 for success, non-zero for error)
        """
        pass

    # Output helpers
    def info(self, message: str):
        """Print info message"""
        print(f"ℹ {message}")

    def success(self, message: str):
        """Print success message"""
        print(f"✅ {message}")

    def error(self, message: str):
        """Print error message"""
        print(f"❌ {message}")

    def warning(self, message: str):
        """Print warning message"""
        print(f"⚠ {message}")

    def line(self, message: str = ""):
        """Print plain line"""
        print(message)
