from ...services.api_client import get_api_client


class DesignServiceService:
    @staticmethod
    def all_services() -> list:
        services = get_api_client().get('/design-services') or []
        return sorted(services, key=lambda s: (s.get('sort_order') or 0, s.get('id') or 0))

    @staticmethod
    def get_service(service_id):
        return get_api_client().get(f'/design-services/{service_id}')

    @staticmethod
    def _payload(form) -> dict:
        return {
            'service_key': form.service_key.data.strip(),
            'title': form.title.data.strip(),
            'description': (form.description.data or '').strip() or None,
            'price': float(form.price.data),
            'is_active': bool(form.is_active.data),
            'sort_order': form.sort_order.data or 0,
        }

    @staticmethod
    def create_service(form):
        return get_api_client().post('/design-services', json_data=DesignServiceService._payload(form))

    @staticmethod
    def update_service(service_id, form):
        return get_api_client().patch(f'/design-services/{service_id}',
                                      json_data=DesignServiceService._payload(form))

    @staticmethod
    def update_price(service_id, price):
        return get_api_client().patch(f'/design-services/{service_id}/price', json_data={'price': float(price)})

    @staticmethod
    def delete_service(service_id):
        return get_api_client().delete(f'/design-services/{service_id}')

    @staticmethod
    def initialize():
        """Ask the backend to create its default set of design services."""
        return get_api_client().post('/design-services/initialize') or {}
