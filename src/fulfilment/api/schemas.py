"""Pydantic request/response schemas for the Fulfilment API.

These are external contracts, kept separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Warehouse Schemas
# ---------------------------------------------------------------------------
class WarehouseRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "business_unit_code": "MWH.001",
                    "location": "ZWOLLE-001",
                    "capacity": 30,
                    "stock": 10,
                }
            ]
        }
    }

    business_unit_code: str = Field(..., max_length=50)
    location: str = Field(..., max_length=50)
    capacity: int | None = None
    stock: int | None = None


class WarehouseResponse(BaseModel):
    business_unit_code: str
    location: str
    capacity: int | None = None
    stock: int | None = None
    created_at: datetime | None = None
    archived_at: datetime | None = None


# ---------------------------------------------------------------------------
# Store Schemas
# ---------------------------------------------------------------------------
class StoreRequest(BaseModel):
    id: str | None = None
    name: str | None = Field(None, max_length=40)
    quantity_products_in_stock: int | None = Field(None, ge=0)


class StoreResponse(BaseModel):
    id: str
    name: str
    quantity_products_in_stock: int


# ---------------------------------------------------------------------------
# Product Schemas
# ---------------------------------------------------------------------------
class ProductRequest(BaseModel):
    id: str | None = None
    name: str | None = Field(None, max_length=40)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    stock: int | None = Field(None, ge=0)


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float | None = None
    stock: int
