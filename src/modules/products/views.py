"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Request bodies are turned into pydantic DTOs; domain exceptions and DTO
validation errors propagate to ``standardized_exception_handler``, which
renders them as 4xx responses.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.products.dtos import CreateProductDTO, ReplaceProductDTO, UpdateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductPatchSerializer,
    ProductReplaceSerializer,
    ProductResponseSerializer,
    ProductWriteSerializer,
)
from modules.products.services import ProductService
from modules.users.repositories.django_repository import UserDjangoRepository

CREATE_FIELDS = ("owner_id", "name", "price", "description", "category_ids")
UPDATE_FIELDS = ("name", "price", "description", "category_ids")


def _payload(data: Any, fields: Iterable[str]) -> Dict[str, Any]:
    """Copy only the keys the client actually sent.

    Keeping absent keys absent is what lets ``UpdateProductDTO`` tell an
    omitted field from an explicit ``null``.
    """
    payload: Dict[str, Any] = {}
    for field in fields:
        if field not in data:
            continue
        if field == "category_ids" and hasattr(data, "getlist"):
            payload[field] = data.getlist(field)
        else:
            payload[field] = data[field]
    return payload


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the Django repositories (DIP).  All ORM
    access goes through the service/repository layer.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            product_repository=ProductDjangoRepository(),
            user_repository=UserDjangoRepository(),
            category_repository=CategoryDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=ProductResponseSerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /api/v1/products/"""
        products = self._service.list_products()
        return Response([p.model_dump(mode="json") for p in products])

    @extend_schema(responses=ProductResponseSerializer)
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        product = self._service.get_product(pk)
        return Response(product.model_dump(mode="json"))

    @extend_schema(responses=ProductResponseSerializer(many=True))
    @action(detail=False, methods=["get"], url_path=r"user/(?P<user_id>[^/.]+)")
    def by_user(self, request: Request, user_id: str | None = None) -> Response:
        """GET /api/v1/products/user/{user_id}/"""
        products = self._service.list_products_by_user(user_id)
        return Response([p.model_dump(mode="json") for p in products])

    @extend_schema(responses=ProductResponseSerializer(many=True))
    @action(
        detail=False, methods=["get"], url_path=r"category/(?P<category_id>[^/.]+)"
    )
    def by_category(self, request: Request, category_id: str | None = None) -> Response:
        """GET /api/v1/products/category/{category_id}/"""
        products = self._service.list_products_by_category(category_id)
        return Response([p.model_dump(mode="json") for p in products])

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductWriteSerializer, responses={201: ProductResponseSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        dto = CreateProductDTO.model_validate(_payload(request.data, CREATE_FIELDS))
        product = self._service.create_product(dto)
        return Response(product.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    @extend_schema(request=ProductReplaceSerializer, responses=ProductResponseSerializer)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/"""
        dto = ReplaceProductDTO.model_validate(_payload(request.data, UPDATE_FIELDS))
        product = self._service.replace_product(pk, dto)
        return Response(product.model_dump(mode="json"))

    @extend_schema(request=ProductPatchSerializer, responses=ProductResponseSerializer)
    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        dto = UpdateProductDTO.model_validate(_payload(request.data, UPDATE_FIELDS))
        product = self._service.update_product(pk, dto)
        return Response(product.model_dump(mode="json"))

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        self._service.delete_product(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
