"""Product API views.

Translates HTTP requests into commands/queries, sends them through the
dispatcher and turns results into status codes.  Domain exceptions are
NOT caught here: the global exception handler owns that translation.
The only statuses decided locally are the id-mismatch 400 on PUT and
the empty 404 when GET by id finds nothing.
"""

from __future__ import annotations

from typing import Any

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import ViewSet

from modules.products.commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from modules.products.queries import GetAllProductsQuery, GetProductByIdQuery
from modules.products.serializers import (
    ProblemDetailsSerializer,
    ProductSerializer,
    UpdateProductSerializer,
)
from shared.infrastructure.bus import dispatcher


def _dump(dto: Any) -> dict:
    return dto.model_dump(by_alias=True)


class ProductViewSet(ViewSet):
    """CRUD endpoints for ``/api/products``.

    Does **not** touch the ORM: every request goes through the dispatcher.
    """

    lookup_value_regex = r"\d+"
    parser_classes = [JSONParser]
    dispatcher = dispatcher

    def _send(self, request: Any) -> Any:
        return async_to_sync(self.dispatcher.send)(request)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @extend_schema(responses={200: ProductSerializer(many=True)})
    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._send(GetAllProductsQuery())
        return Response([_dump(product) for product in products])

    @extend_schema(responses={200: ProductSerializer, 404: None})
    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/products/{pk}"""
        product = self._send(GetProductByIdQuery(id=int(pk)))
        if product is None:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(_dump(product))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @extend_schema(
        request=ProductSerializer,
        responses={201: ProductSerializer, 400: ProblemDetailsSerializer},
    )
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        command = CreateProductCommand.model_validate(request.data)
        product = self._send(command)
        location = reverse("product-detail", kwargs={"pk": product.id}, request=request)
        return Response(
            _dump(product),
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    @extend_schema(
        request=UpdateProductSerializer,
        responses={
            204: None,
            400: ProblemDetailsSerializer,
            404: ProblemDetailsSerializer,
        },
    )
    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/products/{pk}"""
        command = UpdateProductCommand.model_validate(request.data)
        if command.id != int(pk):
            return Response(
                {
                    "title": "Bad request",
                    "status": status.HTTP_400_BAD_REQUEST,
                    "detail": "The route id does not match the id in the request body.",
                },
                status=status.HTTP_400_BAD_REQUEST,
                content_type="application/problem+json",
            )
        self._send(command)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={204: None, 404: ProblemDetailsSerializer})
    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/products/{pk}"""
        self._send(DeleteProductCommand(id=int(pk)))
        return Response(status=status.HTTP_204_NO_CONTENT)
