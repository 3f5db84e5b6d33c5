from flask import Blueprint

game_content_bp = Blueprint('game_content', __name__)

from . import routes  # noqa: E402,F401
