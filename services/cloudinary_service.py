"""
Cloudinary image service for newsletter cover and gallery images.
Uploads and deletes go through a fixed retry policy and report a RetryResult
instead of raising.
"""
import io
import re
import time
import cloudinary
import cloudinary.uploader
from flask import current_app

from common.retry import RetryResult, retry_with_backoff


class CloudinaryDeleteError(Exception):
    """Cloudinary answered a destroy call with something other than 'ok'."""


class PublicIdError(Exception):
    """No public id was given and none could be found in the URL."""


class CloudinaryService:
    """Upload/delete images under a single Cloudinary folder."""

    def __init__(self, folder, attempts=3, delay=1.0, uploader=None, sleep=time.sleep):
        self.folder = folder
        self.attempts = attempts
        self.delay = delay
        self.uploader = uploader or cloudinary.uploader
        self.sleep = sleep

    @classmethod
    def from_app(cls, app):
        """Configure the SDK from app config and build the service."""
        cloudinary.config(
            cloud_name=app.config.get('CLOUDINARY_CLOUD_NAME'),
            api_key=app.config.get('CLOUDINARY_API_KEY'),
            api_secret=app.config.get('CLOUDINARY_API_SECRET'),
            secure=True
        )
        return cls(
            folder=app.config['CLOUDINARY_FOLDER'],
            attempts=app.config.get('UPLOAD_RETRY_ATTEMPTS', 3),
            delay=app.config.get('UPLOAD_RETRY_DELAY', 1.0),
        )

    def _retry(self, operation, label):
        return retry_with_backoff(
            operation,
            attempts=self.attempts,
            delay=self.delay,
            sleep=self.sleep,
            label=label,
        )

    def upload_image(self, data):
        """
        Upload raw image bytes.

        Returns:
            RetryResult whose value is {'imageUrl', 'publicId'} on success.
        """
        def operation():
            # a fresh stream per attempt, a failed attempt may have consumed the last one
            return self.uploader.upload(
                io.BytesIO(data),
                folder=self.folder,
                resource_type='auto',
                quality='auto',
                fetch_format='auto',
            )

        result = self._retry(operation, 'Cloudinary upload')
        if not result.ok:
            return result
        upload = result.value or {}
        return RetryResult(
            ok=True,
            value={'imageUrl': upload.get('secure_url'), 'publicId': upload.get('public_id')},
            attempts=result.attempts,
        )

    def extract_public_id(self, image_url):
        """
        Pull '<folder>/<name>' out of a delivery URL, e.g.
        https://res.cloudinary.com/demo/image/upload/v1614028020/gdgoc-newsletter/sample.jpg
        gives 'gdgoc-newsletter/sample'.
        """
        if not image_url:
            return None
        match = re.search(re.escape(self.folder) + r'/[^.?#]+', image_url)
        return match.group(0) if match else None

    def delete_image(self, public_id=None, image_url=None):
        """
        Destroy an image by public id, or by the id found in its URL.

        Returns:
            RetryResult; its error is a PublicIdError when no id could be resolved.
        """
        target = public_id or self.extract_public_id(image_url)
        if not target:
            return RetryResult(ok=False, error=PublicIdError('Could not extract public_id from URL'))

        current_app.logger.info(f"[Cloudinary Delete] Attempting to delete public_id: {target}")
        result = self._retry(lambda: self.uploader.destroy(target, invalidate=True), 'Cloudinary delete')
        if not result.ok:
            return result

        outcome = (result.value or {}).get('result')
        current_app.logger.info(f"[Cloudinary Delete] Result for {target}: {outcome}")
        if outcome != 'ok':
            return RetryResult(ok=False, error=CloudinaryDeleteError(outcome or 'Deletion failed'),
                               attempts=result.attempts)
        return RetryResult(ok=True, value={'publicId': target}, attempts=result.attempts)


def get_cloudinary_service():
    """The service built by create_app()."""
    return current_app.extensions['cloudinary_service']
