from functools import partial

from flask import flash, redirect, render_template, request, url_for
from flask_login import login_required

from ...popups.actions import open_popup, request_confirmation
from ...popups.registry import PopupKind
from ...popups.sessions import current_registry
from ...utils.pagination import PageState, parse_page_args
from ..products.services import ProductService
from . import orders_bp as blueprint
from .forms import CreateOrderForm, OrderFilterForm
from .services import FILTER_KEYS, OrderService


@blueprint.route('/')
@login_required
def list_orders():
    page, limit = parse_page_args(request.args)
    filter_form = OrderFilterForm(request.args)
    filters = {key: request.args.get(key, '').strip() for key in FILTER_KEYS}
    result = OrderService.list_orders(page=page, limit=limit, filters=filters)
    state = PageState.from_meta(result.meta, per_page=limit)
    active_filters = {key: value for key, value in filters.items() if value}
    return render_template('orders/list.html', orders=result.items, pagination=state,
                           filter_form=filter_form, active_filters=active_filters)


@blueprint.route('/<order_id>/details', methods=['POST'])
@login_required
def order_details(order_id):
    order = OrderService.get_order(order_id)
    open_popup(PopupKind.EDIT_ORDER, {'order_id': order_id, 'data': order})
    return redirect(request.referrer or url_for('orders.list_orders'))


@blueprint.route('/<order_id>/payment-link', methods=['POST'])
@login_required
def payment_link(order_id):
    """Attach a T-Bank payment link to the open order details popup."""
    url = OrderService.payment_url(order_id)
    current_registry().update_popup_data(PopupKind.EDIT_ORDER, {'payment_url': url})
    return redirect(request.referrer or url_for('orders.list_orders'))


@blueprint.route('/new', methods=['POST'])
@login_required
def new_order():
    """Open (or refresh) the create-order popup, loading the chosen product's packages."""
    registry = current_registry()
    product_id = request.form.get('product_id', type=int)
    product = ProductService.get_product(product_id) if product_id else None

    if registry.is_open(PopupKind.CREATE_ORDER):
        registry.update_popup_data(PopupKind.CREATE_ORDER, {
            'product_id': product_id,
            'product': product,
            'preselected_item_id': None,
        })
    else:
        open_popup(PopupKind.CREATE_ORDER, {
            'product_id': product_id,
            'product': product,
            'products': ProductService.all_products(),
        })
    return redirect(request.referrer or url_for('orders.list_orders'))


@blueprint.route('/create', methods=['POST'])
@login_required
def create_order():
    form = CreateOrderForm()
    if not form.validate_on_submit():
        for errors in form.errors.values():
            for error in errors:
                flash(error, 'danger')
        return redirect(request.referrer or url_for('orders.list_orders'))

    OrderService.create_order(form)
    current_registry().close(PopupKind.CREATE_ORDER)
    flash('Order created.', 'success')
    return redirect(url_for('orders.list_orders'))


@blueprint.route('/<order_id>/delete', methods=['POST'])
@login_required
def delete_order(order_id):
    current_registry().close(PopupKind.EDIT_ORDER)
    request_confirmation(
        'order', order_id,
        title=f'Delete order #{order_id}',
        message='The order will be removed permanently.',
        on_confirm=partial(OrderService.delete_order, order_id),
        return_url=url_for('orders.list_orders'),
        success_message=f'Order #{order_id} deleted.',
    )
    return redirect(request.referrer or url_for('orders.list_orders'))
