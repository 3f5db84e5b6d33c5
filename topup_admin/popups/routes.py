from flask import abort, current_app, flash, redirect, request, url_for

from ..core.error_handlers import ApiError
from ..core.signals import entity_deleted
from ..utils.urls import is_safe_redirect
from . import popups_bp as blueprint
from .registry import PopupKind
from .sessions import current_registry


def _back(default=None):
    for target in (request.form.get('next'), request.referrer, default):
        if is_safe_redirect(target):
            return redirect(target)
    return redirect(url_for('dashboard.index'))


@blueprint.route('/<kind>/close', methods=['POST'])
def close_popup(kind):
    try:
        current_registry().close(kind)
    except ValueError:
        abort(404)
    return _back()


@blueprint.route('/close-all', methods=['POST'])
def close_all_popups():
    current_registry().close_all()
    return _back()


@blueprint.route('/deleteConfirmation/confirm', methods=['POST'])
def confirm_delete():
    """
    Run the confirmed action stored with the delete confirmation popup.

    The form names the entity it was rendered for; the stored action runs only
    when that is still the entity in the popup.
    """
    registry = current_registry()
    entity_type = request.form.get('entity_type', '')
    entity_id = request.form.get('entity_id', '')

    def same_entity(data):
        return data.get('entity_type') == entity_type and str(data.get('id')) == entity_id

    data = registry.take(PopupKind.DELETE_CONFIRMATION, where=same_entity)
    if data is None:
        if registry.is_open(PopupKind.DELETE_CONFIRMATION):
            current_app.logger.warning("Stale delete confirmation for %s %s", entity_type, entity_id)
            flash('This confirmation is out of date. Check the dialog and try again.', 'warning')
        else:
            flash('Nothing to confirm.', 'info')
        return _back()

    return_url = data.get('return_url')
    on_confirm = data.get('on_confirm')

    if not callable(on_confirm):
        current_app.logger.error("Delete confirmation for %s has no action", data.get('entity_type'))
        flash('This action is no longer available.', 'danger')
        return _back(return_url)

    try:
        on_confirm()
    except ApiError as exc:
        flash(exc.message, 'danger')
        return _back(return_url)

    entity_deleted.send(
        current_app._get_current_object(),
        entity_type=data.get('entity_type'),
        entity_id=data.get('id'),
        title=data.get('title', ''),
    )
    flash(data.get('success_message') or f"{data.get('title', 'Item')}: done.", 'success')
    if is_safe_redirect(return_url):
        return redirect(return_url)
    return _back()
