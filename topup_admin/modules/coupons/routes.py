from functools import partial

from flask import flash, redirect, render_template, request, url_for
from flask_login import login_required

from ...core.error_handlers import ApiError
from ...popups.actions import request_confirmation, show_message
from ...utils.pagination import PageState, parse_page_args
from . import coupons_bp as blueprint
from .forms import CouponCheckForm, CouponForm
from .services import CouponService


@blueprint.route('/')
@login_required
def list_coupons():
    # The backend returns every coupon at once
    page, limit = parse_page_args(request.args)
    state, coupons = PageState.from_items(CouponService.all_coupons(), page=page, per_page=limit)
    return render_template('coupons/list.html', coupons=coupons, pagination=state,
                           check_form=CouponCheckForm())


@blueprint.route('/create', methods=['GET', 'POST'])
@login_required
def create_coupon():
    form = CouponForm()
    form.gameIds.choices = CouponService.game_choices()
    if form.validate_on_submit():
        CouponService.create_coupon(form)
        flash('Coupon created.', 'success')
        return redirect(url_for('coupons.list_coupons'))
    return render_template('coupons/form.html', form=form, title='New coupon')


@blueprint.route('/<int:coupon_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_coupon(coupon_id):
    coupon = CouponService.get_coupon(coupon_id)
    form = CouponForm(data=CouponService.form_data(coupon) if request.method == 'GET' else None)
    form.gameIds.choices = CouponService.game_choices()
    if form.validate_on_submit():
        CouponService.update_coupon(coupon_id, form)
        flash('Coupon updated.', 'success')
        return redirect(url_for('coupons.list_coupons'))
    return render_template('coupons/form.html', form=form, coupon=coupon, title='Edit coupon')


@blueprint.route('/<int:coupon_id>/toggle', methods=['POST'])
@login_required
def toggle_coupon(coupon_id):
    active = request.form.get('active') == 'true'
    CouponService.set_active(coupon_id, not active)
    flash('Coupon disabled.' if active else 'Coupon enabled.', 'success')
    return redirect(request.referrer or url_for('coupons.list_coupons'))


@blueprint.route('/<int:coupon_id>/delete', methods=['POST'])
@login_required
def delete_coupon(coupon_id):
    code = request.form.get('code') or f'#{coupon_id}'
    request_confirmation(
        'coupon', coupon_id,
        title=f'Delete coupon {code}',
        message='Customers will no longer be able to use this code.',
        on_confirm=partial(CouponService.delete_coupon, coupon_id),
        return_url=url_for('coupons.list_coupons'),
        success_message=f'Coupon {code} deleted.',
    )
    return redirect(request.referrer or url_for('coupons.list_coupons'))


@blueprint.route('/check', methods=['POST'])
@login_required
def check_coupon():
    """Ask the backend about a code and show the answer in a popup."""
    form = CouponCheckForm()
    if not form.validate_on_submit():
        flash('Enter a code to check.', 'warning')
        return redirect(url_for('coupons.list_coupons'))

    code = form.code.data.strip()
    try:
        result = CouponService.check_code(code)
    except ApiError as exc:
        show_message(f'Coupon {code}', exc.message, size='sm', valid=False)
    else:
        discount = result.get('discount') if isinstance(result, dict) else None
        content = f'Valid, discount {discount}%.' if discount is not None else 'Valid.'
        show_message(f'Coupon {code}', content, size='sm', valid=True, result=result)
    return redirect(url_for('coupons.list_coupons'))
