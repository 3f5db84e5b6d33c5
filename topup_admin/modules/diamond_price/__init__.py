from flask import Blueprint

diamond_price_bp = Blueprint('diamond_price', __name__)

from . import routes  # noqa: E402,F401
