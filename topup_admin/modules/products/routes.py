from functools import partial

from flask import current_app, flash, redirect, render_template, request, url_for
from flask_login import login_required

from ...popups.actions import open_popup, request_confirmation
from ...popups.registry import PopupKind
from ...utils.pagination import PageState, parse_page_args
from . import products_bp as blueprint
from .forms import ProductForm
from .services import ProductService


def _handle_rows(form):
    """Add/remove package rows without submitting the product."""
    if form.add_row.data:
        form.replenishment.append_entry()
        return True
    if form.remove_row.data:
        if len(form.replenishment.entries) > 1:
            form.replenishment.pop_entry()
        else:
            flash('A product needs at least one package.', 'warning')
        return True
    return False


@blueprint.route('/')
@login_required
def list_products():
    page, limit = parse_page_args(request.args)
    search = request.args.get('search', '').strip()
    result = ProductService.list_products(page=page, limit=limit, search=search or None)
    state = PageState.from_meta(result.meta, per_page=limit)
    return render_template('products/list.html', products=result.items, pagination=state, search=search)


@blueprint.route('/create', methods=['GET', 'POST'])
@login_required
def create_product():
    form = ProductForm()
    form.smile_api_game.choices = ProductService.smile_choices()

    if request.method == 'POST' and _handle_rows(form):
        return render_template('products/form.html', form=form, title='New product')

    if form.validate_on_submit():
        ProductService.create_product(form)
        current_app.logger.info("Product '%s' created", form.name.data)
        flash('Product created.', 'success')
        return redirect(url_for('products.list_products'))

    return render_template('products/form.html', form=form, title='New product')


@blueprint.route('/<int:product_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_product(product_id):
    product = ProductService.get_product(product_id)
    if request.method == 'GET':
        form = ProductForm(data=ProductService.form_data(product))
    else:
        form = ProductForm()
    form.smile_api_game.choices = ProductService.smile_choices()

    if request.method == 'POST' and _handle_rows(form):
        return render_template('products/form.html', form=form, product=product, title='Edit product')

    if form.validate_on_submit():
        ProductService.update_product(product_id, form)
        flash('Product updated.', 'success')
        return redirect(url_for('products.list_products'))

    return render_template('products/form.html', form=form, product=product, title='Edit product')


@blueprint.route('/<int:product_id>/details', methods=['POST'])
@login_required
def product_details(product_id):
    product = ProductService.get_product(product_id)
    open_popup(PopupKind.PRODUCT_DETAILS, {'product_id': product_id, 'product': product})
    return redirect(request.referrer or url_for('products.list_products'))


@blueprint.route('/<int:product_id>/order', methods=['POST'])
@login_required
def order_product(product_id):
    """Open the create-order popup with this product (and optionally a package) chosen."""
    product = ProductService.get_product(product_id)
    payload = {'product_id': product_id, 'product': product}
    item = request.form.get('item_id', type=int)
    if item is not None:
        payload['preselected_item_id'] = item
    open_popup(PopupKind.CREATE_ORDER, payload)
    return redirect(request.referrer or url_for('products.list_products'))


@blueprint.route('/<int:product_id>/delete', methods=['POST'])
@login_required
def delete_product(product_id):
    name = request.form.get('name') or f'Product #{product_id}'
    request_confirmation(
        'product', product_id,
        title=f'Delete {name}',
        message='The product and all of its packages will be removed. This cannot be undone.',
        on_confirm=partial(ProductService.delete_product, product_id),
        return_url=url_for('products.list_products'),
        success_message=f'{name} deleted.',
    )
    return redirect(request.referrer or url_for('products.list_products'))
