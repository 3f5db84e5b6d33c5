from functools import partial

from flask import current_app, flash, redirect, render_template, request, url_for
from flask_login import login_required

from ...popups.actions import request_confirmation
from ...utils.pagination import PageState, parse_page_args
from . import users_bp as blueprint
from .services import UserService


@blueprint.route('/')
@login_required
def list_users():
    page, limit = parse_page_args(request.args)
    search = request.args.get('search', '').strip()
    result = UserService.list_users(page=page, limit=limit, search=search or None)
    state = PageState.from_meta(result.meta, per_page=limit)
    return render_template('users/list.html', users=result.items, pagination=state, search=search)


@blueprint.route('/<user_id>')
@login_required
def user_detail(user_id):
    user = UserService.get_user(user_id)
    return render_template('users/detail.html', user=user)


@blueprint.route('/<user_id>/payments')
@login_required
def user_payments(user_id):
    """Payment history of one customer."""
    page, limit = parse_page_args(request.args)
    user = UserService.get_user(user_id)
    result = UserService.get_payments(user_id, page=page, limit=limit)
    state = PageState.from_meta(result.meta, per_page=limit)
    return render_template('users/payments.html', user=user, payments=result.items, pagination=state)


@blueprint.route('/<user_id>/block', methods=['POST'])
@login_required
def block_user(user_id):
    identifier = request.form.get('identifier') or user_id
    request_confirmation(
        'user', user_id,
        title=f'Block {identifier}',
        message=f'{identifier} will no longer be able to sign in or place orders.',
        on_confirm=partial(UserService.block_user, user_id),
        return_url=url_for('users.list_users', **request.args),
        confirm_label='Block',
        success_message=f'{identifier} has been blocked.',
    )
    return redirect(request.referrer or url_for('users.list_users'))


@blueprint.route('/<user_id>/unblock', methods=['POST'])
@login_required
def unblock_user(user_id):
    UserService.unblock_user(user_id)
    current_app.logger.info("User %s unblocked", user_id)
    flash('User has been unblocked.', 'success')
    return redirect(request.referrer or url_for('users.list_users'))
