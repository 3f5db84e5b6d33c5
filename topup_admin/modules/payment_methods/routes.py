from functools import partial

from flask import flash, redirect, render_template, request, url_for
from flask_login import login_required

from ...popups.actions import request_confirmation
from ...utils.pagination import PageState, parse_page_args
from . import payment_methods_bp as blueprint
from .forms import PaymentMethodForm
from .services import BankService, PaymentMethodService

ACTIVE_FILTERS = {'true': True, 'false': False}


@blueprint.route('/')
@login_required
def list_methods():
    page, limit = parse_page_args(request.args)
    country = request.args.get('country', '').strip().upper()
    active = request.args.get('active', '')
    methods = PaymentMethodService.list_methods(country=country or None, active=ACTIVE_FILTERS.get(active))
    state, methods = PageState.from_items(methods, page=page, per_page=limit)
    return render_template('payment_methods/list.html', methods=methods, pagination=state,
                           country=country, active=active)


@blueprint.route('/create', methods=['GET', 'POST'])
@login_required
def create_method():
    form = PaymentMethodForm()
    if form.validate_on_submit():
        PaymentMethodService.create_method(form)
        flash('Payment method created.', 'success')
        return redirect(url_for('payment_methods.list_methods'))
    return render_template('payment_methods/form.html', form=form, title='New payment method')


@blueprint.route('/<int:method_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_method(method_id):
    method = PaymentMethodService.get_method(method_id)
    form = PaymentMethodForm(data=method if request.method == 'GET' else None)
    if form.validate_on_submit():
        PaymentMethodService.update_method(method_id, form)
        flash('Payment method updated.', 'success')
        return redirect(url_for('payment_methods.list_methods'))
    return render_template('payment_methods/form.html', form=form, method=method, title='Edit payment method')


@blueprint.route('/<int:method_id>/toggle', methods=['POST'])
@login_required
def toggle_method(method_id):
    active = request.form.get('active') == 'true'
    PaymentMethodService.set_active(method_id, not active)
    flash('Payment method disabled.' if active else 'Payment method enabled.', 'success')
    return redirect(request.referrer or url_for('payment_methods.list_methods'))


@blueprint.route('/<int:method_id>/delete', methods=['POST'])
@login_required
def delete_method(method_id):
    name = request.form.get('name') or f'#{method_id}'
    request_confirmation(
        'payment_method', method_id,
        title=f'Delete payment method {name}',
        message='Customers will no longer be able to pay this way.',
        on_confirm=partial(PaymentMethodService.delete_method, method_id),
        return_url=url_for('payment_methods.list_methods'),
        success_message=f'Payment method {name} deleted.',
    )
    return redirect(request.referrer or url_for('payment_methods.list_methods'))


@blueprint.route('/banks')
@login_required
def list_banks():
    page, limit = parse_page_args(request.args)
    result = BankService.list_banks(page=page, limit=limit)
    state = PageState.from_meta(result.meta, per_page=limit)
    return render_template('payment_methods/banks.html', banks=result.items, pagination=state)


@blueprint.route('/banks/<int:bank_id>/toggle', methods=['POST'])
@login_required
def toggle_bank(bank_id):
    active = request.form.get('active') == 'true'
    bank = BankService.set_active(bank_id, not active) or {}
    name = bank.get('name') or f'Bank #{bank_id}'
    flash(f'{name} is now {"disabled" if active else "enabled"}.', 'success')
    return redirect(request.referrer or url_for('payment_methods.list_banks'))
