from functools import partial

from flask import flash, redirect, render_template, request, url_for
from flask_login import login_required

from ...popups.actions import request_confirmation
from . import diamond_price_bp as blueprint
from .forms import DiamondPriceForm
from .services import DiamondPriceService


@blueprint.route('/')
@login_required
def list_prices():
    prices = sorted(DiamondPriceService.all_prices(), key=lambda p: not p.get('is_active'))
    return render_template('diamond_price/list.html', prices=prices)


@blueprint.route('/create', methods=['GET', 'POST'])
@login_required
def create_price():
    form = DiamondPriceForm()
    if form.validate_on_submit():
        DiamondPriceService.create_price(form)
        flash('Diamond price created.', 'success')
        return redirect(url_for('diamond_price.list_prices'))
    return render_template('diamond_price/form.html', form=form, title='New diamond price')


@blueprint.route('/<int:price_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_price(price_id):
    price = DiamondPriceService.get_price(price_id)
    form = DiamondPriceForm(data=price if request.method == 'GET' else None)
    if form.validate_on_submit():
        DiamondPriceService.update_price(price_id, form)
        flash('Diamond price updated.', 'success')
        return redirect(url_for('diamond_price.list_prices'))
    return render_template('diamond_price/form.html', form=form, price=price, title='Edit diamond price')


@blueprint.route('/<int:price_id>/activate', methods=['POST'])
@login_required
def activate_price(price_id):
    DiamondPriceService.activate_price(price_id)
    flash('Diamond price activated.', 'success')
    return redirect(url_for('diamond_price.list_prices'))


@blueprint.route('/<int:price_id>/delete', methods=['POST'])
@login_required
def delete_price(price_id):
    label = request.form.get('label') or f'#{price_id}'
    request_confirmation(
        'diamond_price', price_id,
        title=f'Delete diamond price {label}',
        message='The price will be removed from the list.',
        on_confirm=partial(DiamondPriceService.delete_price, price_id),
        return_url=url_for('diamond_price.list_prices'),
        success_message='Diamond price deleted.',
    )
    return redirect(request.referrer or url_for('diamond_price.list_prices'))
