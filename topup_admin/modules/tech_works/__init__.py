from flask import Blueprint

tech_works_bp = Blueprint('tech_works', __name__)

from . import routes  # noqa: E402,F401
