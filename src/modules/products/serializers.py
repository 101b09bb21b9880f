"""Product DRF serializers.

Used for request parsing documentation and OpenAPI schema generation
only.  Validation and business logic live in the pydantic DTOs and the
Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductWriteSerializer(serializers.Serializer):
    owner_id = serializers.UUIDField()
    name = serializers.CharField(max_length=255)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    description = serializers.CharField(required=False, allow_null=True)
    category_ids = serializers.ListField(
        child=serializers.UUIDField(), required=False, default=list
    )


class ProductReplaceSerializer(ProductWriteSerializer):
    owner_id = None


class ProductPatchSerializer(ProductReplaceSerializer):
    name = serializers.CharField(max_length=255, required=False)
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False
    )
    category_ids = serializers.ListField(child=serializers.UUIDField(), required=False)


class OwnerSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    email = serializers.EmailField()


class CategorySummarySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    description = serializers.CharField()


class ProductResponseSerializer(serializers.Serializer):
    """Shape of ``ProductOutputDTO`` as rendered by the API."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    description = serializers.CharField(allow_null=True)
    owner = OwnerSummarySerializer()
    categories = CategorySummarySerializer(many=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()
