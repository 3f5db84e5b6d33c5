"""Pydantic models for the REST backend payloads the dashboard reads."""

from __future__ import annotations

import math
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ListMeta(BaseModel):
    """Pagination block of a backend list response (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    total_items: int = Field(0, alias="totalItems")
    item_count: int = Field(0, alias="itemCount")
    items_per_page: int = Field(0, alias="itemsPerPage")
    total_pages: int = Field(0, alias="totalPages")
    current_page: int = Field(1, alias="currentPage")

    @classmethod
    def from_pagination(cls, pagination: dict) -> "ListMeta":
        """Articles and tags report {page, limit, total, pages} instead."""
        return cls(
            total_items=pagination.get("total", 0),
            item_count=0,
            items_per_page=pagination.get("limit", 0),
            total_pages=pagination.get("pages", pagination.get("totalPages", 0)),
            current_page=pagination.get("page", 1),
        )


class ListPage(BaseModel):
    """One page of items plus its pagination metadata."""

    items: List[Any]
    meta: ListMeta

    @classmethod
    def parse(cls, body: Any, items_key: str = "data", page: int = 1, per_page: int = 25) -> "ListPage":
        """
        Normalize the shapes the backend uses for lists:

        * a bare JSON array (everything at once)
        * ``{<items_key>: [...], meta: {...}}``
        * ``{<items_key>: [...], pagination: {...}}``
        * ``{<items_key>: [...], total: n, totalPages: m}``
        * ``{<items_key>: [...], lastPage: m}``
        """
        if isinstance(body, list):
            items = body
            meta = ListMeta(
                total_items=len(items),
                item_count=len(items),
                items_per_page=per_page,
                total_pages=math.ceil(len(items) / per_page) if items else 0,
                current_page=page,
            )
            return cls(items=items, meta=meta)

        body = body or {}
        items = body.get(items_key) or []
        if isinstance(body.get("meta"), dict):
            meta = ListMeta.model_validate(body["meta"])
        elif isinstance(body.get("pagination"), dict):
            meta = ListMeta.from_pagination(body["pagination"])
        else:
            total = body.get("total", len(items))
            meta = ListMeta(
                total_items=total,
                item_count=len(items),
                items_per_page=per_page,
                total_pages=body.get("totalPages") or body.get("lastPage") or (math.ceil(total / per_page) if total else 0),
                current_page=page,
            )
        if not meta.items_per_page:
            meta.items_per_page = per_page
        return cls(items=items, meta=meta)


class MonthTotal(BaseModel):
    name: str
    total: float = 0


class PackageCount(BaseModel):
    name: str
    count: int = 0


class OrderAnalytics(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    orders_by_month: List[MonthTotal] = Field(default_factory=list, alias="ordersByMonth")
    packages_purchased: List[PackageCount] = Field(default_factory=list, alias="packagesPurchased")
    total_orders: int = Field(0, alias="totalOrders")
    total_revenue: float = Field(0, alias="totalRevenue")
    average_order_value: float = Field(0, alias="averageOrderValue")


class TokenPair(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = None
    access_token: str
    refresh_token: str


class DecodedToken(BaseModel):
    """Claims the dashboard shows; never used for authorization."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = None
    identifier: Optional[str] = None
    role: Optional[str] = None
    iat: Optional[int] = None
    exp: Optional[int] = None
