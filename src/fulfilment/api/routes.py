"""FastAPI routes for the Fulfilment domain — warehouses, stores and products.

Thin adapters that translate HTTP requests into domain commands.
Engine rule violations surface as Protean ValidationErrors and are mapped to
400 by the registered exception handlers; lookups that find nothing are 404.
"""

from fastapi import APIRouter, HTTPException, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from fulfilment.api.schemas import (
    ProductRequest,
    ProductResponse,
    StoreRequest,
    StoreResponse,
    WarehouseRequest,
    WarehouseResponse,
)
from fulfilment.products.management import CreateProduct, DeleteProduct, UpdateProduct
from fulfilment.products.product import Product
from fulfilment.stores.management import CreateStore, DeleteStore, PatchStore, UpdateStore
from fulfilment.stores.store import Store
from fulfilment.warehouse.management import ArchiveWarehouse, CreateWarehouse, ReplaceWarehouse
from fulfilment.warehouse.warehouse import Warehouse


def _get_or_404(aggregate_cls, identifier: str, label: str):
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail=f"{label} with id of {identifier} does not exist.") from None


# ---------------------------------------------------------------------------
# Warehouse Router
# ---------------------------------------------------------------------------
warehouse_router = APIRouter(prefix="/warehouse", tags=["warehouses"])


def _warehouse_response(warehouse: Warehouse) -> WarehouseResponse:
    return WarehouseResponse(
        business_unit_code=warehouse.business_unit_code,
        location=warehouse.location,
        capacity=warehouse.capacity,
        stock=warehouse.stock,
        created_at=warehouse.created_at,
        archived_at=warehouse.archived_at,
    )


def _find_warehouse_or_404(code: str) -> Warehouse:
    warehouse = current_domain.repository_for(Warehouse).find_by_business_unit_code(code)
    if warehouse is None:
        raise HTTPException(status_code=404, detail=f"Warehouse with business unit code {code} not found")
    return warehouse


@warehouse_router.get("", response_model=list[WarehouseResponse])
async def list_warehouses() -> list[WarehouseResponse]:
    warehouses = current_domain.repository_for(Warehouse).list_all()
    return [_warehouse_response(w) for w in warehouses]


@warehouse_router.post("", status_code=201, response_model=WarehouseResponse)
async def create_warehouse(body: WarehouseRequest) -> WarehouseResponse:
    command = CreateWarehouse(
        business_unit_code=body.business_unit_code,
        location=body.location,
        capacity=body.capacity,
        stock=body.stock,
    )
    code = current_domain.process(command, asynchronous=False)
    return _warehouse_response(_find_warehouse_or_404(code))


@warehouse_router.get("/{business_unit_code}", response_model=WarehouseResponse)
async def get_warehouse(business_unit_code: str) -> WarehouseResponse:
    return _warehouse_response(_find_warehouse_or_404(business_unit_code))


@warehouse_router.delete("/{business_unit_code}", status_code=204)
async def archive_warehouse(business_unit_code: str) -> Response:
    _find_warehouse_or_404(business_unit_code)
    current_domain.process(ArchiveWarehouse(business_unit_code=business_unit_code), asynchronous=False)
    return Response(status_code=204)


@warehouse_router.post("/{business_unit_code}/replacement", response_model=WarehouseResponse)
async def replace_warehouse(business_unit_code: str, body: WarehouseRequest) -> WarehouseResponse:
    if body.business_unit_code != business_unit_code:
        raise HTTPException(status_code=400, detail="Business unit code in path and body must match")

    command = ReplaceWarehouse(
        business_unit_code=business_unit_code,
        location=body.location,
        capacity=body.capacity,
        stock=body.stock,
    )
    current_domain.process(command, asynchronous=False)
    return _warehouse_response(_find_warehouse_or_404(business_unit_code))


# ---------------------------------------------------------------------------
# Store Router
# ---------------------------------------------------------------------------
store_router = APIRouter(prefix="/store", tags=["stores"])


def _store_response(store: Store) -> StoreResponse:
    return StoreResponse(
        id=str(store.id),
        name=store.name,
        quantity_products_in_stock=store.quantity_products_in_stock or 0,
    )


@store_router.get("", response_model=list[StoreResponse])
async def list_stores() -> list[StoreResponse]:
    stores = current_domain.repository_for(Store)._dao.query.limit(None).all().items
    return [_store_response(s) for s in sorted(stores, key=lambda s: s.name)]


@store_router.get("/{store_id}", response_model=StoreResponse)
async def get_store(store_id: str) -> StoreResponse:
    return _store_response(_get_or_404(Store, store_id, "Store"))


@store_router.post("", status_code=201, response_model=StoreResponse)
async def create_store(body: StoreRequest) -> StoreResponse:
    if body.id is not None:
        raise HTTPException(status_code=422, detail="Id was invalidly set on request.")
    if body.name is None:
        raise HTTPException(status_code=422, detail="Store Name was not set on request.")

    command = CreateStore(name=body.name, quantity_products_in_stock=body.quantity_products_in_stock)
    store_id = current_domain.process(command, asynchronous=False)
    return _store_response(_get_or_404(Store, store_id, "Store"))


@store_router.put("/{store_id}", response_model=StoreResponse)
async def update_store(store_id: str, body: StoreRequest) -> StoreResponse:
    if body.name is None:
        raise HTTPException(status_code=422, detail="Store Name was not set on request.")
    _get_or_404(Store, store_id, "Store")

    command = UpdateStore(
        store_id=store_id,
        name=body.name,
        quantity_products_in_stock=body.quantity_products_in_stock,
    )
    current_domain.process(command, asynchronous=False)
    return _store_response(_get_or_404(Store, store_id, "Store"))


@store_router.patch("/{store_id}", response_model=StoreResponse)
async def patch_store(store_id: str, body: StoreRequest) -> StoreResponse:
    _get_or_404(Store, store_id, "Store")

    command = PatchStore(
        store_id=store_id,
        name=body.name,
        quantity_products_in_stock=body.quantity_products_in_stock,
    )
    current_domain.process(command, asynchronous=False)
    return _store_response(_get_or_404(Store, store_id, "Store"))


@store_router.delete("/{store_id}", status_code=204)
async def delete_store(store_id: str) -> Response:
    _get_or_404(Store, store_id, "Store")
    current_domain.process(DeleteStore(store_id=store_id), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/product", tags=["products"])


def _product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        stock=product.stock or 0,
    )


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product)._dao.query.limit(None).all().items
    return [_product_response(p) for p in sorted(products, key=lambda p: p.name)]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product_response(_get_or_404(Product, product_id, "Product"))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: ProductRequest) -> ProductResponse:
    if body.id is not None:
        raise HTTPException(status_code=422, detail="Id was invalidly set on request.")
    if body.name is None:
        raise HTTPException(status_code=422, detail="Product Name was not set on request.")

    command = CreateProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        stock=body.stock,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return _product_response(_get_or_404(Product, product_id, "Product"))


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, body: ProductRequest) -> ProductResponse:
    if body.name is None:
        raise HTTPException(status_code=422, detail="Product Name was not set on request.")
    _get_or_404(Product, product_id, "Product")

    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        stock=body.stock,
    )
    current_domain.process(command, asynchronous=False)
    return _product_response(_get_or_404(Product, product_id, "Product"))


@product_router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: str) -> Response:
    _get_or_404(Product, product_id, "Product")
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return Response(status_code=204)
