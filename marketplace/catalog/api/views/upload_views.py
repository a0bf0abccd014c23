"""
Admin image uploads.

Both endpoints take a multipart body with one ``image`` file, resize it to
the target's bounds and store it through the configured storage backend.
The returned URL is then saved on a product (``images``) or boutique
(``banner``) with a regular update call.
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.views import APIView

from authentication.permissions import CanUploadImages
from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer
from marketplace.catalog.api.serializers import ImageUploadResultSerializer, ImageUploadSerializer
from marketplace.catalog.domain.services.image_service import BOUTIQUE_IMAGE, PRODUCT_IMAGE
from marketplace.services import ErrorCodes
from utils.exceptions import InternalError, UploadError, raise_for_result
from utils.responses import envelope

ERRORS = {
    ErrorCodes.NO_FILE: UploadError,
    ErrorCodes.INVALID_FILE_TYPE: UploadError,
    ErrorCodes.FILE_TOO_LARGE: UploadError,
    ErrorCodes.INVALID_IMAGE: UploadError,
    ErrorCodes.STORAGE_ERROR: InternalError,
}

UPLOAD_RESPONSES = {
    201: ImageUploadResultSerializer,
    400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing, invalid or oversized image"),
    401: OpenApiResponse(response=ErrorResponseSerializer, description="Authentication required"),
}


class BaseImageUploadView(APIView):
    parser_classes = [MultiPartParser, FormParser]
    permission_classes = [CanUploadImages]
    target = None

    def post(self, request):
        image_file = request.FILES.get("image")
        uploaded = raise_for_result(container.image_service().upload_image(image_file, self.target), ERRORS)
        return envelope(
            data=uploaded,
            message="Image uploaded successfully.",
            http_status=status.HTTP_201_CREATED,
        )


class ProductImageUploadView(BaseImageUploadView):
    target = PRODUCT_IMAGE

    @extend_schema(
        operation_id="upload_product_image",
        summary="Upload a product image",
        description="Resized to fit 800x800.",
        request={"multipart/form-data": ImageUploadSerializer},
        responses=UPLOAD_RESPONSES,
        tags=["Marketplace - Uploads"],
    )
    def post(self, request):
        return super().post(request)


class BoutiqueImageUploadView(BaseImageUploadView):
    target = BOUTIQUE_IMAGE

    @extend_schema(
        operation_id="upload_boutique_image",
        summary="Upload a boutique banner",
        description="Resized to fit 1200x600.",
        request={"multipart/form-data": ImageUploadSerializer},
        responses=UPLOAD_RESPONSES,
        tags=["Marketplace - Uploads"],
    )
    def post(self, request):
        return super().post(request)
