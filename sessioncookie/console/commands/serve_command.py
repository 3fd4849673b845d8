"""
Serve Command
Runs the Sanic server
"""
from sessioncookie.console.command import Command
from sessioncookie.support import AppConfig


class ServeCommand(Command):
    """Run the web server"""

    name = "serve"
    description = "Run the web server"
    signature = "serve [--host HOST] [--port PORT] [--dev]"

    def handle(self, host: str = None, port: int = None, dev: bool = False, **kwargs):
        from sessioncookie.application import create_app

        config = AppConfig.from_env()
        app = create_app(config)

        self.info(f"Serving {config.name} on http://{host or config.host}:{port or config.port}")
        app.run(
            host=host or config.host,
            port=int(port or config.port),
            dev=dev,
            single_process=True,
            access_log=config.debug or dev,
        )
        return 0
