from functools import partial

from flask import flash, redirect, render_template, request, url_for
from flask_login import login_required

from ...popups.actions import request_confirmation
from ...utils.pagination import PageState, parse_page_args
from . import game_content_bp as blueprint
from .forms import FAQForm, GameContentEditForm, GameContentForm, ReviewForm, TranslationForm
from .services import GameContentService, has_translation


def _flash_errors(form):
    for errors in form.errors.values():
        for error in errors:
            flash(error, 'danger')


@blueprint.route('/')
@login_required
def list_games():
    page, limit = parse_page_args(request.args)
    state, games = PageState.from_items(GameContentService.all_games(), page=page, per_page=limit)
    return render_template('game_content/list.html', games=games, pagination=state)


@blueprint.route('/create', methods=['GET', 'POST'])
@login_required
def create_content():
    form = GameContentForm()
    existing = [game.get('gameId') for game in GameContentService.all_games()]
    form.gameId.choices = GameContentService.game_choices(exclude=existing)
    if form.validate_on_submit():
        GameContentService.create_content(form)
        flash('Game content created.', 'success')
        return redirect(url_for('game_content.edit_content', game_id=form.gameId.data))
    return render_template('game_content/form.html', form=form, title='New game content')


@blueprint.route('/<game_id>', methods=['GET', 'POST'])
@login_required
def edit_content(game_id):
    """Content editor plus the review and FAQ lists of one game."""
    content = GameContentService.get_content(game_id)
    form = GameContentEditForm(data=GameContentService.form_data(content) if request.method == 'GET' else None)
    if form.validate_on_submit():
        GameContentService.update_content(game_id, form, current=content)
        flash('Game content updated.', 'success')
        return redirect(url_for('game_content.edit_content', game_id=game_id))
    title = f"Content for {content.get('gameName') or game_id}"
    return render_template('game_content/edit.html', form=form, content=content, game_id=game_id, title=title,
                           language='ru', translated=has_translation(content),
                           review_form=ReviewForm(formdata=None), faq_form=FAQForm(formdata=None))


@blueprint.route('/<game_id>/delete', methods=['POST'])
@login_required
def delete_content(game_id):
    name = request.form.get('name') or game_id
    request_confirmation(
        'game_content', game_id,
        title=f'Delete content for {name}',
        message='Description, instruction, reviews and FAQ of this game will be removed.',
        on_confirm=partial(GameContentService.delete_content, game_id),
        return_url=url_for('game_content.list_games'),
        success_message=f'Content for {name} deleted.',
    )
    return redirect(request.referrer or url_for('game_content.list_games'))


@blueprint.route('/<game_id>/reviews', methods=['POST'])
@login_required
def add_review(game_id):
    form = ReviewForm()
    if form.validate_on_submit():
        GameContentService.add_review(game_id, form)
        flash('Review added.', 'success')
    else:
        _flash_errors(form)
    return redirect(url_for('game_content.edit_content', game_id=game_id))


@blueprint.route('/<game_id>/reviews/<review_id>/delete', methods=['POST'])
@login_required
def delete_review(game_id, review_id):
    GameContentService.delete_review(game_id, review_id)
    flash('Review deleted.', 'success')
    return redirect(url_for('game_content.edit_content', game_id=game_id))


@blueprint.route('/<game_id>/faq', methods=['POST'])
@login_required
def add_faq(game_id):
    form = FAQForm()
    if form.validate_on_submit():
        GameContentService.add_faq(game_id, form)
        flash('Question added.', 'success')
    else:
        _flash_errors(form)
    return redirect(url_for('game_content.edit_content', game_id=game_id))


@blueprint.route('/<game_id>/faq/<faq_id>/delete', methods=['POST'])
@login_required
def delete_faq(game_id, faq_id):
    GameContentService.delete_faq(game_id, faq_id)
    flash('Question deleted.', 'success')
    return redirect(url_for('game_content.edit_content', game_id=game_id))


@blueprint.route('/<game_id>/translation', methods=['GET', 'POST'])
@login_required
def edit_translation(game_id):
    """English side of the language toggle."""
    content = GameContentService.get_content(game_id)
    form = TranslationForm(data=GameContentService.translation_data(content) if request.method == 'GET' else None)
    if form.validate_on_submit():
        try:
            GameContentService.update_translation(game_id, form, current=content)
        except ValueError as exc:
            form.steps_en.errors.append(str(exc))
        else:
            flash('Translation saved.', 'success')
            return redirect(url_for('game_content.edit_translation', game_id=game_id))
    title = f"Content for {content.get('gameName') or game_id}"
    steps = (content.get('instruction') or {}).get('steps') or []
    return render_template('game_content/translation.html', form=form, content=content, game_id=game_id,
                           title=title, steps=steps, language='en', translated=has_translation(content))
