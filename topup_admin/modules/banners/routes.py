from functools import partial

from flask import abort, flash, redirect, render_template, request, url_for
from flask_login import login_required

from ...core.error_handlers import ApiError
from ...popups.actions import request_confirmation
from ...utils.pagination import PageState, parse_page_args
from . import banners_bp as blueprint
from .forms import BannerForm, BannerImageForm
from .services import IMAGE_ENDPOINTS, BannerService


@blueprint.route('/')
@login_required
def list_banners():
    page, limit = parse_page_args(request.args)
    state, banners = PageState.from_items(BannerService.all_banners(), page=page, per_page=limit)
    return render_template('banners/list.html', banners=banners, pagination=state,
                           image_form=BannerImageForm())


@blueprint.route('/create', methods=['GET', 'POST'])
@login_required
def create_banner():
    form = BannerForm()
    if form.validate_on_submit():
        banner = BannerService.create_banner(form.title.data, form.buttonLink.data) or {}
        banner_id = banner.get('id')
        if banner_id is not None:
            try:
                BannerService.save_images(banner_id, form)
            except ApiError as exc:
                flash(f'Banner created, but the image upload failed: {exc.message}', 'warning')
                return redirect(url_for('banners.list_banners'))
        flash('Banner created.', 'success')
        return redirect(url_for('banners.list_banners'))
    return render_template('banners/form.html', form=form, title='New banner')


@blueprint.route('/<int:banner_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_banner(banner_id):
    banner = BannerService.get_banner(banner_id)
    initial = {'title': banner.get('title'), 'buttonLink': banner.get('buttonLink')}
    form = BannerForm(data=initial if request.method == 'GET' else None)
    if form.validate_on_submit():
        BannerService.update_banner(banner_id, form.title.data, form.buttonLink.data)
        BannerService.save_images(banner_id, form)
        flash('Banner updated.', 'success')
        return redirect(url_for('banners.list_banners'))
    return render_template('banners/form.html', form=form, banner=banner, title='Edit banner')


@blueprint.route('/<int:banner_id>/image', methods=['POST'])
@login_required
def upload_image(banner_id):
    form = BannerImageForm()
    if form.target.data not in IMAGE_ENDPOINTS:
        abort(400)
    if form.validate_on_submit():
        BannerService.upload_image(banner_id, form.target.data, form.file.data)
        flash('Image uploaded.', 'success')
    else:
        for error in form.file.errors:
            flash(error, 'danger')
    return redirect(url_for('banners.list_banners'))


@blueprint.route('/<int:banner_id>/delete', methods=['POST'])
@login_required
def delete_banner(banner_id):
    title = request.form.get('title') or f'Banner #{banner_id}'
    request_confirmation(
        'banner', banner_id,
        title=f'Delete {title}',
        message='The banner disappears from the storefront immediately.',
        on_confirm=partial(BannerService.delete_banner, banner_id),
        return_url=url_for('banners.list_banners'),
        success_message=f'{title} deleted.',
    )
    return redirect(request.referrer or url_for('banners.list_banners'))
