from flask import render_template
from flask_login import login_required

from . import dashboard_bp as blueprint
from .services import DashboardService


@blueprint.route('/')
@login_required
def index():
    """Shop overview: revenue, orders per month and the best selling packages."""
    overview = DashboardService.get_overview()
    return render_template('dashboard/index.html', **overview)
