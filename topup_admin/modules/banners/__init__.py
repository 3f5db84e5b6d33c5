from flask import Blueprint

banners_bp = Blueprint('banners', __name__)

from . import routes  # noqa: E402,F401
