from functools import partial

from flask import abort, flash, redirect, render_template, request, url_for
from flask_login import login_required

from ...popups.actions import request_confirmation
from ...utils.pagination import PageState, parse_page_args
from . import feedback_bp as blueprint
from .services import TABS, FeedbackService, moderation_status


@blueprint.route('/')
@blueprint.route('/<tab>')
@login_required
def list_feedback(tab='incoming'):
    """Feedback waiting for moderation, or the accepted feedback shown on the storefront."""
    if tab not in TABS:
        abort(404)
    page, limit = parse_page_args(request.args)
    result = FeedbackService.list_feedback(tab, page=page, limit=limit)
    state = PageState.from_meta(result.meta, per_page=limit)
    return render_template('feedback/list.html', feedback=result.items, pagination=state, tab=tab,
                           tabs=TABS, status_of=moderation_status)


@blueprint.route('/<int:feedback_id>/accept', methods=['POST'])
@login_required
def accept_feedback(feedback_id):
    FeedbackService.set_verified(feedback_id, True)
    flash('Feedback accepted.', 'success')
    return redirect(request.referrer or url_for('feedback.list_feedback'))


@blueprint.route('/<int:feedback_id>/decline', methods=['POST'])
@login_required
def decline_feedback(feedback_id):
    FeedbackService.set_verified(feedback_id, False)
    flash('Feedback declined.', 'success')
    return redirect(request.referrer or url_for('feedback.list_feedback'))


@blueprint.route('/<int:feedback_id>/delete', methods=['POST'])
@login_required
def delete_feedback(feedback_id):
    author = request.form.get('author') or 'a customer'
    request_confirmation(
        'feedback', feedback_id,
        title=f'Delete feedback from {author}',
        message='The feedback will disappear from the storefront.',
        on_confirm=partial(FeedbackService.delete_feedback, feedback_id),
        return_url=request.referrer or url_for('feedback.list_feedback'),
        success_message='Feedback deleted.',
    )
    return redirect(request.referrer or url_for('feedback.list_feedback'))
