"""Pydantic schemas for request and response models.

Pydantic models are used for validating and serialising data that
crosses the boundary of the API. They only pin down the *shape* of a
receipt (which fields exist and that they are strings or lists);
the rules a receipt has to satisfy before it is scored live in
:mod:`app.services.validation` so they can be evaluated as a plain
predicate.

Field names follow the camelCase wire format; Python code reads them
through snake_case attributes.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """Individual line item on a receipt."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    short_description: str = Field(alias="shortDescription")
    price: str


class Receipt(BaseModel):
    """A submitted purchase receipt."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    items: List[Item]
    total: str


class ProcessReceiptResponse(BaseModel):
    id: str


class GetPointsResponse(BaseModel):
    points: int
