from flask import flash, redirect, render_template, url_for
from flask_login import login_required

from . import tech_works_bp as blueprint
from .forms import TechWorksForm
from .services import TechWorksService, is_in_future, to_local_time


@blueprint.route('/', methods=['GET', 'POST'])
@login_required
def index():
    status = TechWorksService.get_status()
    form = TechWorksForm()
    if form.validate_on_submit():
        ends_at = form.techWorksEndsAt.data
        if form.isTechWorks.data and ends_at is not None and not is_in_future(ends_at):
            form.techWorksEndsAt.errors.append("The end time must be in the future.")
        else:
            TechWorksService.update(bool(form.isTechWorks.data), ends_at)
            flash('Maintenance settings updated.', 'success')
            return redirect(url_for('tech_works.index'))
    elif not form.is_submitted():
        form.isTechWorks.data = bool(status.get('isTechWorks'))
        form.techWorksEndsAt.data = to_local_time(status.get('techWorksEndsAt'))
    return render_template('tech_works/index.html', status=status, form=form)


@blueprint.route('/toggle', methods=['POST'])
@login_required
def toggle():
    status = TechWorksService.toggle()
    flash('Maintenance mode is on.' if status.get('isTechWorks') else 'Maintenance mode is off.', 'success')
    return redirect(url_for('tech_works.index'))
