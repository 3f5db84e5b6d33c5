import logging

from ...services.api_client import get_api_client

logger = logging.getLogger(__name__)

IMAGE_ENDPOINTS = {
    'image': 'image',
    'mobileImage': 'mobile-image',
}


class BannerService:
    @staticmethod
    def all_banners() -> list:
        return get_api_client().get('/banners') or []

    @staticmethod
    def get_banner(banner_id):
        return get_api_client().get(f'/banners/{banner_id}')

    @staticmethod
    def create_banner(title: str, button_link: str):
        return get_api_client().post('/banners', json_data={
            'title': title.strip(), 'buttonLink': button_link.strip(), 'image': '', 'mobileImage': '',
        })

    @staticmethod
    def update_banner(banner_id, title: str, button_link: str):
        return get_api_client().patch(f'/banners/{banner_id}', json_data={
            'title': title.strip(), 'buttonLink': button_link.strip(),
        })

    @staticmethod
    def upload_image(banner_id, target: str, upload):
        """Send a desktop ('image') or mobile ('mobileImage') picture for a banner."""
        if target not in IMAGE_ENDPOINTS:
            raise ValueError("Unknown banner image %r" % (target,))
        files = {'file': (upload.filename, upload.read(), upload.mimetype)}
        logger.info("Uploading %s for banner %s", target, banner_id)
        return get_api_client().patch(f'/banners/{banner_id}/{IMAGE_ENDPOINTS[target]}', files=files)

    @staticmethod
    def delete_banner(banner_id):
        return get_api_client().delete(f'/banners/{banner_id}')

    @staticmethod
    def save_images(banner_id, form):
        for target in IMAGE_ENDPOINTS:
            upload = getattr(form, target).data
            if upload and getattr(upload, 'filename', None):
                BannerService.upload_image(banner_id, target, upload)
