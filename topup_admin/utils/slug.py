# File: topup_admin/utils/slug.py
# URL slugs for articles and tags.

import re

_DISALLOWED = re.compile(r'[^a-zа-яё0-9\s-]')
_WHITESPACE = re.compile(r'\s+')
_HYPHENS = re.compile(r'-+')


def generate_slug(title: str) -> str:
    """
    Build a URL slug from a title.

    Latin and Cyrillic letters, digits and hyphens survive; whitespace runs
    become a single hyphen.

    >>> generate_slug('Как пополнить  Genshin Impact?')
    'как-пополнить-genshin-impact'
    """
    if not title:
        return ''
    slug = _DISALLOWED.sub('', title.lower())
    slug = _WHITESPACE.sub('-', slug.strip())
    slug = _HYPHENS.sub('-', slug)
    return slug.strip('-')
