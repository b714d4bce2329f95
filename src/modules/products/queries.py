"""Product queries: read-only requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GetAllProductsQuery(BaseModel):
    model_config = ConfigDict(frozen=True)


class GetProductByIdQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
