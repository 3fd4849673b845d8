"""
Generate Secret Command
Generates a session signing secret, optionally rotating it into .env
"""
from sessioncookie.console.command import Command
from sessioncookie.defaults import DEFAULT_SECRET_LENGTH
from sessioncookie.support import Crypto, EnvHelper


class GenerateSecretCommand(Command):
    """Generate a random session secret"""

    name = "secret:generate"
    description = "Generate a session secret (--write rotates it into .env)"
    signature = "secret:generate [--write] [--keep N]"

    def handle(self, write: bool = False, keep: int = 0, **kwargs):
        secret = Crypto.generate_token(DEFAULT_SECRET_LENGTH)

        if not write:
            self.line("Add this to SESSION_SECRETS in your .env file (newest first):")
            self.line()
            self.line(secret)
            return 0

        # Newest first; older secrets still verify existing cookies
        secrets = [secret] + EnvHelper.get_list('SESSION_SECRETS')
        if keep and keep > 0:
            secrets = secrets[:keep]

        EnvHelper.set('SESSION_SECRETS', ','.join(secrets))
        self.success(f"Session secret rotated ({len(secrets)} secret(s) configured in {EnvHelper.path()})")
        return 0
