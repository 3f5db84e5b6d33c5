from flask import Blueprint

design_services_bp = Blueprint('design_services', __name__)

from . import routes  # noqa: E402,F401
