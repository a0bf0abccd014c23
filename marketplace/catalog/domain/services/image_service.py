"""
ImageService - product and boutique image uploads.

Validates the upload (declared type, size, decodable image), downscales it
to the target bounds with Pillow and stores it through the storage
abstraction.
"""

import uuid
from io import BytesIO
from typing import Any, Dict

from django.conf import settings
from PIL import Image, UnidentifiedImageError

from infrastructure.container import container
from infrastructure.storage.interface import StorageException
from marketplace.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

PRODUCT_IMAGE = "product"
BOUTIQUE_IMAGE = "boutique"

# target -> (storage folder, MARKETPLACE bounds key)
TARGETS = {
    PRODUCT_IMAGE: ("products", "PRODUCT_IMAGE_BOUNDS"),
    BOUTIQUE_IMAGE: ("boutiques", "BOUTIQUE_IMAGE_BOUNDS"),
}

# Pillow format -> (extension, MIME type)
OUTPUT_FORMATS = {
    "JPEG": ("jpg", "image/jpeg"),
    "PNG": ("png", "image/png"),
    "WEBP": ("webp", "image/webp"),
}


class ImageService(BaseService):
    """
    Service for image uploads.

    Responsibilities:
    - Reject missing, mistyped, oversized or undecodable files before any transfer
    - Fit the image inside the target bounds (never upscales)
    - Store it under ``products/`` or ``boutiques/`` with a unique key
    """

    def __init__(self, storage=None):
        super().__init__()
        self.storage = storage or container.storage()

    def validate(self, image_file) -> ServiceResult[None]:
        config = settings.MARKETPLACE
        if image_file is None:
            return service_err(ErrorCodes.NO_FILE, "No image file provided.")

        allowed_types = config["UPLOAD_ALLOWED_TYPES"]
        if getattr(image_file, "content_type", None) not in allowed_types:
            return service_err(
                ErrorCodes.INVALID_FILE_TYPE,
                f"Invalid file type. Allowed types: {', '.join(allowed_types)}",
            )

        max_size = config["UPLOAD_MAX_SIZE"]
        if image_file.size > max_size:
            return service_err(
                ErrorCodes.FILE_TOO_LARGE,
                f"Image file too large. Maximum size is {max_size // (1024 * 1024)}MB",
            )
        return service_ok(None)

    @BaseService.log_performance
    def upload_image(self, image_file, target: str) -> ServiceResult[Dict[str, Any]]:
        """
        Validate, resize and store an uploaded image.

        Args:
            image_file: Django UploadedFile from the ``image`` multipart field
            target: ``"product"`` or ``"boutique"``

        Returns:
            ServiceResult with ``url``, ``key``, ``width``, ``height`` and ``size``
        """
        folder, bounds_key = TARGETS[target]

        validation = self.validate(image_file)
        if not validation.ok:
            return validation

        try:
            image = Image.open(image_file)
            image.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            self.logger.warning(f"Rejected undecodable upload {getattr(image_file, 'name', '')}: {e}")
            return service_err(ErrorCodes.INVALID_IMAGE, "The file is not a valid image.")

        if image.format not in OUTPUT_FORMATS:
            return service_err(
                ErrorCodes.INVALID_FILE_TYPE,
                f"Invalid file type. Allowed types: {', '.join(settings.MARKETPLACE['UPLOAD_ALLOWED_TYPES'])}",
            )
        extension, content_type = OUTPUT_FORMATS[image.format]
        output_format = image.format

        image.thumbnail(settings.MARKETPLACE[bounds_key], Image.Resampling.LANCZOS)
        if output_format == "JPEG" and image.mode not in ("RGB", "L"):
            image = image.convert("RGB")

        buffer = BytesIO()
        save_options = {"quality": 85} if output_format in ("JPEG", "WEBP") else {"optimize": True}
        image.save(buffer, format=output_format, **save_options)
        buffer.seek(0)

        key = f"{folder}/{uuid.uuid4().hex}.{extension}"
        try:
            stored = self.storage.upload(buffer, key, content_type)
        except StorageException as e:
            self.logger.error(f"Image upload to storage failed for {key}: {e}")
            return service_err(ErrorCodes.STORAGE_ERROR, "Image upload failed. Please try again.")

        self.logger.info(f"Uploaded {target} image {stored.key} ({image.width}x{image.height}, {stored.size} bytes)")
        return service_ok(
            {
                "url": stored.url,
                "key": stored.key,
                "width": image.width,
                "height": image.height,
                "size": stored.size,
            }
        )
