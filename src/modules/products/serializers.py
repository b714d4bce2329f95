"""Product DRF serializers used to document the API schema.

Request parsing and response shaping go through the Pydantic models in
``commands.py`` / ``dtos.py``; these serializers only describe the same
shapes to drf-spectacular.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Wire shape of ``ProductDto``."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(max_length=500, allow_blank=True)
    price = serializers.DecimalField(max_digits=18, decimal_places=2)
    stockQuantity = serializers.IntegerField(min_value=0)


class UpdateProductSerializer(ProductSerializer):
    id = serializers.IntegerField()


class ProblemDetailsSerializer(serializers.Serializer):
    """Error body produced by the global exception handler."""

    title = serializers.CharField()
    status = serializers.IntegerField()
    errors = serializers.DictField(
        child=serializers.ListField(child=serializers.CharField()), required=False
    )
    detail = serializers.CharField(required=False)
