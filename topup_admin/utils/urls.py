# File: topup_admin/utils/urls.py
# Redirect targets taken from the request.

from typing import Optional
from urllib.parse import urlparse

from flask import request


def is_safe_redirect(target: Optional[str]) -> bool:
    """True for relative paths and absolute URLs pointing back at this host."""
    if not target or '\\' in target:
        return False
    parsed = urlparse(target)
    if parsed.scheme not in ('', 'http', 'https'):
        return False
    return parsed.netloc in ('', request.host)
