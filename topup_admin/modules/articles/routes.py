from functools import partial

from flask import flash, redirect, render_template, request, url_for
from flask_login import login_required

from ...popups.actions import request_confirmation
from ...utils.pagination import PageState, parse_page_args
from . import articles_bp as blueprint
from .forms import ArticleForm, TagForm
from .services import ArticleService, TagService

PUBLISH_FILTERS = {'published': True, 'draft': False}


# --- articles --------------------------------------------------------------

@blueprint.route('/')
@login_required
def list_articles():
    page, limit = parse_page_args(request.args)
    search = request.args.get('search', '').strip()
    status = request.args.get('status', '')
    result = ArticleService.list_articles(page=page, limit=limit, search=search or None,
                                          is_published=PUBLISH_FILTERS.get(status))
    state = PageState.from_meta(result.meta, per_page=limit)
    return render_template('articles/list.html', articles=result.items, pagination=state,
                           search=search, status=status)


@blueprint.route('/create', methods=['GET', 'POST'])
@login_required
def create_article():
    form = ArticleForm()
    form.tag_ids.choices = TagService.tag_choices()
    if form.validate_on_submit():
        ArticleService.create_article(form)
        flash('Article created.', 'success')
        return redirect(url_for('articles.list_articles'))
    return render_template('articles/form.html', form=form, title='New article')


@blueprint.route('/<int:article_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_article(article_id):
    article = ArticleService.get_article(article_id)
    form = ArticleForm(data=ArticleService.form_data(article) if request.method == 'GET' else None)
    form.tag_ids.choices = TagService.tag_choices()
    if form.validate_on_submit():
        ArticleService.update_article(article_id, form)
        flash('Article updated.', 'success')
        return redirect(url_for('articles.list_articles'))
    return render_template('articles/form.html', form=form, article=article, title='Edit article')


@blueprint.route('/<int:article_id>/toggle-publish', methods=['POST'])
@login_required
def toggle_publish(article_id):
    article = ArticleService.toggle_publish(article_id) or {}
    if article.get('is_published') is True:
        flash('Article published.', 'success')
    elif article.get('is_published') is False:
        flash('Article moved to drafts.', 'info')
    else:
        flash('Publication status changed.', 'success')
    return redirect(request.referrer or url_for('articles.list_articles'))


@blueprint.route('/<int:article_id>/delete', methods=['POST'])
@login_required
def delete_article(article_id):
    title = request.form.get('title') or f'Article #{article_id}'
    request_confirmation(
        'article', article_id,
        title=f'Delete "{title}"',
        message='The article will be removed from the site.',
        on_confirm=partial(ArticleService.delete_article, article_id),
        return_url=url_for('articles.list_articles'),
        success_message='Article deleted.',
    )
    return redirect(request.referrer or url_for('articles.list_articles'))


# --- tags ------------------------------------------------------------------

@blueprint.route('/tags')
@login_required
def list_tags():
    page, limit = parse_page_args(request.args)
    search = request.args.get('search', '').strip()
    result = TagService.list_tags(page=page, limit=limit, search=search or None)
    state = PageState.from_meta(result.meta, per_page=limit)
    return render_template('articles/tags.html', tags=result.items, pagination=state, search=search)


@blueprint.route('/tags/create', methods=['GET', 'POST'])
@login_required
def create_tag():
    form = TagForm()
    if form.validate_on_submit():
        TagService.create_tag(form)
        flash('Tag created.', 'success')
        return redirect(url_for('articles.list_tags'))
    return render_template('articles/tag_form.html', form=form, title='New tag')


@blueprint.route('/tags/<int:tag_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_tag(tag_id):
    tag = TagService.get_tag(tag_id)
    form = TagForm(data=tag if request.method == 'GET' else None)
    if form.validate_on_submit():
        TagService.update_tag(tag_id, form)
        flash('Tag updated.', 'success')
        return redirect(url_for('articles.list_tags'))
    return render_template('articles/tag_form.html', form=form, tag=tag, title='Edit tag')


@blueprint.route('/tags/<int:tag_id>/delete', methods=['POST'])
@login_required
def delete_tag(tag_id):
    name = request.form.get('name') or f'#{tag_id}'
    request_confirmation(
        'tag', tag_id,
        title=f'Delete tag {name}',
        message='Articles keep their content but lose this tag.',
        on_confirm=partial(TagService.delete_tag, tag_id),
        return_url=url_for('articles.list_tags'),
        success_message=f'Tag {name} deleted.',
    )
    return redirect(request.referrer or url_for('articles.list_tags'))
