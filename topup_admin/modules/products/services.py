"""Products, their top-up packages and the Smile catalogue."""

import json
import logging
from decimal import Decimal
from typing import Optional

from ...core.error_handlers import ApiError
from ...schemas import ListPage
from ...services.api_client import get_api_client

logger = logging.getLogger(__name__)


class ProductService:
    @staticmethod
    def list_products(page: int = 1, limit: int = 25, search: Optional[str] = None) -> ListPage:
        body = get_api_client().get('/product', params={'page': page, 'limit': limit, 'search': search})
        return ListPage.parse(body, page=page, per_page=limit)

    @staticmethod
    def all_products() -> list:
        """Every product, for selectors."""
        body = get_api_client().get('/product')
        return ListPage.parse(body).items

    @staticmethod
    def get_product(product_id):
        return get_api_client().get(f'/product/{product_id}')

    @staticmethod
    def smile_games() -> list:
        """Games available from the Smile provider; empty when the catalogue is unreachable."""
        try:
            body = get_api_client().get('/product/smile')
        except ApiError as exc:
            logger.warning("Smile catalogue unavailable: %s", exc.message)
            return []
        if isinstance(body, dict):
            body = body.get('data') or []
        return body or []

    @staticmethod
    def smile_choices() -> list:
        choices = [('', 'No Smile game')]
        for game in ProductService.smile_games():
            if isinstance(game, dict):
                key = str(game.get('id') or game.get('apiGame') or game.get('name'))
                choices.append((key, game.get('name') or key))
            else:
                choices.append((str(game), str(game)))
        return choices

    @staticmethod
    def build_payload(form):
        """Turn a validated ProductForm into multipart fields and files."""
        packages = []
        for entry in form.replenishment.entries:
            package = {
                'price': float(entry.form.price.data or Decimal('0')),
                'amount': entry.form.amount.data,
                'type': entry.form.type.data.strip(),
            }
            if entry.form.sku.data:
                package['sku'] = entry.form.sku.data.strip()
            packages.append(package)

        data = {
            'name': form.name.data.strip(),
            'description': form.description.data.strip(),
            'replenishment': json.dumps(packages, ensure_ascii=False),
        }
        if form.smile_api_game.data:
            data['smile_api_game'] = form.smile_api_game.data

        files = []
        for index, upload in enumerate(f for f in (form.images.data or []) if f and f.filename):
            # Read once so a replayed request sends the same bytes
            files.append((f'images[{index}]', (upload.filename, upload.read(), upload.mimetype)))
        return data, files or None

    @staticmethod
    def create_product(form):
        data, files = ProductService.build_payload(form)
        return get_api_client().post('/product', data=data, files=files)

    @staticmethod
    def update_product(product_id, form):
        data, files = ProductService.build_payload(form)
        return get_api_client().patch(f'/product/{product_id}', data=data, files=files)

    @staticmethod
    def delete_product(product_id):
        return get_api_client().delete(f'/product/{product_id}')

    @staticmethod
    def form_data(product: dict) -> dict:
        """Initial form values for editing an existing product."""
        return {
            'name': product.get('name', ''),
            'description': product.get('description', ''),
            'smile_api_game': product.get('smile_api_game') or '',
            'replenishment': product.get('replenishment') or [{}],
        }
