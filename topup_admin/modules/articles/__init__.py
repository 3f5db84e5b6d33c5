from flask import Blueprint

articles_bp = Blueprint('articles', __name__)

from . import routes  # noqa: E402,F401
