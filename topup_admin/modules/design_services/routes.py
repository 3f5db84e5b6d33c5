from functools import partial

from flask import current_app, flash, redirect, render_template, request, url_for
from flask_login import login_required

from ...popups.actions import request_confirmation
from ...utils.pagination import PageState, parse_page_args
from . import design_services_bp as blueprint
from .forms import DesignServiceForm, PriceForm
from .services import DesignServiceService


@blueprint.route('/')
@login_required
def list_services():
    page, limit = parse_page_args(request.args)
    state, services = PageState.from_items(DesignServiceService.all_services(), page=page, per_page=limit)
    return render_template('design_services/list.html', services=services, pagination=state,
                           price_form=PriceForm())


@blueprint.route('/create', methods=['GET', 'POST'])
@login_required
def create_service():
    form = DesignServiceForm()
    if form.validate_on_submit():
        DesignServiceService.create_service(form)
        flash('Design service created.', 'success')
        return redirect(url_for('design_services.list_services'))
    return render_template('design_services/form.html', form=form, title='New design service')


@blueprint.route('/<int:service_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_service(service_id):
    service = DesignServiceService.get_service(service_id)
    form = DesignServiceForm(data=service if request.method == 'GET' else None)
    if form.validate_on_submit():
        DesignServiceService.update_service(service_id, form)
        flash('Design service updated.', 'success')
        return redirect(url_for('design_services.list_services'))
    return render_template('design_services/form.html', form=form, service=service, title='Edit design service')


@blueprint.route('/<int:service_id>/price', methods=['POST'])
@login_required
def update_price(service_id):
    form = PriceForm()
    if form.validate_on_submit():
        DesignServiceService.update_price(service_id, form.price.data)
        flash('Price updated.', 'success')
    else:
        for error in form.price.errors:
            flash(error, 'danger')
    return redirect(request.referrer or url_for('design_services.list_services'))


@blueprint.route('/initialize', methods=['POST'])
@login_required
def initialize_services():
    result = DesignServiceService.initialize()
    current_app.logger.info("Design services initialized: %s", result)
    flash(result.get('message') or f"Created {result.get('count', 0)} default services.", 'success')
    return redirect(url_for('design_services.list_services'))


@blueprint.route('/<int:service_id>/delete', methods=['POST'])
@login_required
def delete_service(service_id):
    title = request.form.get('title') or f'Service #{service_id}'
    request_confirmation(
        'design_service', service_id,
        title=f'Delete {title}',
        message='The service will no longer be offered to customers.',
        on_confirm=partial(DesignServiceService.delete_service, service_id),
        return_url=url_for('design_services.list_services'),
        success_message=f'{title} deleted.',
    )
    return redirect(request.referrer or url_for('design_services.list_services'))
