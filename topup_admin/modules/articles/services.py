"""Blog articles and their tags."""

from typing import Optional

from ...schemas import ListPage
from ...services.api_client import get_api_client

ARTICLE_FIELDS = ('title', 'slug', 'excerpt', 'content', 'featured_image',
                  'meta_title', 'meta_description', 'is_published')
TAG_FIELDS = ('name', 'slug', 'description', 'color')


def _form_payload(form, fields) -> dict:
    payload = {}
    for name in fields:
        value = getattr(form, name).data
        if isinstance(value, str):
            value = value.strip()
            if not value and name not in ('title', 'slug', 'name', 'content'):
                continue
        payload[name] = value
    return payload


class ArticleService:
    @staticmethod
    def list_articles(page: int = 1, limit: int = 25, search: Optional[str] = None,
                      is_published: Optional[bool] = None) -> ListPage:
        params = {'page': page, 'limit': limit, 'search': search}
        if is_published is not None:
            params['is_published'] = 'true' if is_published else 'false'
        body = get_api_client().get('/articles', params=params)
        return ListPage.parse(body, items_key='articles', page=page, per_page=limit)

    @staticmethod
    def get_article(article_id):
        return get_api_client().get(f'/articles/{article_id}')

    @staticmethod
    def article_payload(form) -> dict:
        payload = _form_payload(form, ARTICLE_FIELDS)
        payload['tag_ids'] = list(form.tag_ids.data or [])
        return payload

    @staticmethod
    def create_article(form):
        return get_api_client().post('/articles', json_data=ArticleService.article_payload(form))

    @staticmethod
    def update_article(article_id, form):
        return get_api_client().patch(f'/articles/{article_id}', json_data=ArticleService.article_payload(form))

    @staticmethod
    def toggle_publish(article_id):
        return get_api_client().patch(f'/articles/{article_id}/toggle-publish')

    @staticmethod
    def delete_article(article_id):
        return get_api_client().delete(f'/articles/{article_id}')

    @staticmethod
    def form_data(article: dict) -> dict:
        data = {name: article.get(name) for name in ARTICLE_FIELDS}
        data['tag_ids'] = [tag.get('id') for tag in article.get('tags') or []]
        return data


class TagService:
    @staticmethod
    def list_tags(page: int = 1, limit: int = 100, search: Optional[str] = None) -> ListPage:
        body = get_api_client().get('/tags', params={'page': page, 'limit': limit, 'search': search})
        return ListPage.parse(body, items_key='tags', page=page, per_page=limit)

    @staticmethod
    def tag_choices() -> list:
        return [(tag['id'], tag.get('name', tag['id'])) for tag in TagService.list_tags(limit=200).items]

    @staticmethod
    def get_tag(tag_id):
        return get_api_client().get(f'/tags/{tag_id}')

    @staticmethod
    def create_tag(form):
        return get_api_client().post('/tags', json_data=_form_payload(form, TAG_FIELDS))

    @staticmethod
    def update_tag(tag_id, form):
        return get_api_client().patch(f'/tags/{tag_id}', json_data=_form_payload(form, TAG_FIELDS))

    @staticmethod
    def delete_tag(tag_id):
        return get_api_client().delete(f'/tags/{tag_id}')
