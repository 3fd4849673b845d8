"""
Console
Dispatches `sessioncookie <command>` to registered commands
"""
import asyncio
import inspect
import sys
import traceback
from typing import Dict, List, Optional, Tuple

from sessioncookie.console.command import Command
from sessioncookie.console.commands import GenerateSecretCommand, ServeCommand
from sessioncookie.exceptions import ConfigurationException


class Artisan:

    COMMANDS = [ServeCommand, GenerateSecretCommand]

    def __init__(self):
        self.commands: Dict[str, Command] = {}
        for command_class in self.COMMANDS:
            command = command_class()
            self.commands[command.name] = command

    def show_help(self):
        """Show available commands"""
        print("Usage: sessioncookie <command> [options]")
        print()
        for name in sorted(self.commands):
            cmd = self.commands[name]
            print(f"  {cmd.signature:<40} {cmd.description}")

    def run(self, argv: List[str]) -> int:
        """Run the CLI application"""
        if len(argv) < 2 or argv[1] in ['help', '--help', '-h']:
            self.show_help()
            return 0

        command_name = argv[1]
        if command_name not in self.commands:
            print(f"❌ Unknown command: {command_name}\n")
            self.show_help()
            return 1

        command = self.commands[command_name]
        args, kwargs = self._parse_args(argv[2:])

        try:
            result = command.handle(*args, **kwargs)
            if inspect.isawaitable(result):
                result = asyncio.run(result)
            return result if result is not None else 0

        except KeyboardInterrupt:
            print("\n\n⚠ Command interrupted by user")
            return 130
        except ConfigurationException as e:
            command.error(e.message)
            return 1
        except Exception as e:
            print(f"\n❌ Error executing command: {e}\n")
            traceback.print_exc()
            return 1

    def _parse_args(self, argv: List[str]) -> Tuple[list, dict]:
        """
        Parse command line arguments
        Returns tuple of (positional_args, keyword_args)
        """
        args = []
        kwargs = {}

        i = 0
        while i < len(argv):
            arg = argv[i]
            if arg.startswith('--'):
                # Long option (--dev, --port=8000, --port 8000)
                if '=' in arg:
                    key, value = arg[2:].split('=', 1)
                    kwargs[key] = self._coerce(value)
                elif i + 1 < len(argv) and not argv[i + 1].startswith('-'):
                    kwargs[arg[2:]] = self._coerce(argv[i + 1])
                    i += 1
                else:
                    kwargs[arg[2:]] = True
            elif arg.startswith('-'):
                kwargs[arg[1:]] = True
            else:
                args.append(arg)
            i += 1

        return args, kwargs

    @staticmethod
    def _coerce(value: str):
        """Convert an option value to int or bool where it looks like one"""
        try:
            return int(value)
        except ValueError:
            if value.lower() in ('true', 'false'):
                return value.lower() == 'true'
            return value


def main(argv: Optional[List[str]] = None) -> int:
    """Console script entry point"""
    return Artisan().run(sys.argv if argv is None else argv)
