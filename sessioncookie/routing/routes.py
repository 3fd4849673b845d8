"""
Routes
Registers the session demo blueprint
"""
from sanic import Blueprint, Request

from sessioncookie.controllers import SessionController
from sessioncookie.http import ResponseHelper


async def health(request: Request):
    return ResponseHelper.json({'status': 'ok'})


def create_blueprint(controller: SessionController) -> Blueprint:
    """
    Build the session blueprint

    GET  /                     demo page
    GET  /_data/session        saved text and session dump
    POST /_action/setup        page load action
    POST /_action/update-text  save newText
    POST /_action/destroy      clear the session cookie
    GET  /health               liveness probe
    """
    bp = Blueprint('session')

    bp.add_route(controller.home, '/', methods=['GET'], name='home')
    bp.add_route(controller.data, '/_data/session', methods=['GET'], name='data')
    bp.add_route(controller.setup, '/_action/setup', methods=['POST'], name='setup')
    bp.add_route(controller.update_text, '/_action/update-text', methods=['POST'], name='update_text')
    bp.add_route(controller.destroy, '/_action/destroy', methods=['POST'], name='destroy')
    bp.add_route(health, '/health', methods=['GET'], name='health')

    return bp
