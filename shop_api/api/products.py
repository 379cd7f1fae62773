"""
Products API endpoints
"""
from contextlib import contextmanager
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.database import get_db
from shop_api.exceptions import ProductNotFoundError, ProductValidationError, StoreError
from shop_api.schemas import PaginatedResponse, ProductPayload, ProductResponse
from shop_api.services.product_service import ProductService
from shop_api.utils.pagination import ProductQueryParameters

router = APIRouter()


def get_product_service(db: AsyncSession = Depends(get_db)) -> ProductService:
    return ProductService(db)


@contextmanager
def _service_errors():
    """Map service exceptions to HTTP errors"""
    try:
        yield
    except ProductValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError:
        # Already logged with the traceback by the service
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/", response_model=PaginatedResponse[ProductResponse])
async def list_products(
    page: int = 1,
    size: Optional[int] = None,
    min_price: Optional[Decimal] = Query(None, alias="minPrice"),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice"),
    sku: Optional[str] = None,
    name: Optional[str] = None,
    service: ProductService = Depends(get_product_service),
):
    """List products one page at a time, optionally filtered"""
    params = ProductQueryParameters(
        page=page, size=size, min_price=min_price, max_price=max_price, sku=sku, name=name
    )
    with _service_errors():
        products, total = await service.list_products(params)
    return PaginatedResponse[ProductResponse](
        data=[ProductResponse.model_validate(p) for p in products],
        page_number=params.page,
        page_size=params.size,
        total_records=total,
        total_pages=params.total_pages(total),
    )


@router.get("/available", response_model=List[ProductResponse])
async def list_available_products(service: ProductService = Depends(get_product_service)):
    """All products currently marked available (not paged)"""
    with _service_errors():
        return await service.list_available()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    with _service_errors():
        return await service.get_product(product_id)


@router.post("/", response_model=ProductResponse, status_code=201)
async def create_product(
    request: Request,
    response: Response,
    data: Optional[ProductPayload] = Body(None),
    service: ProductService = Depends(get_product_service),
):
    """Create a product with a caller-assigned id"""
    with _service_errors():
        product = await service.create_product(data)
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product


@router.put("/{product_id}", status_code=204, response_class=Response)
async def update_product(
    product_id: int,
    data: Optional[ProductPayload] = Body(None),
    service: ProductService = Depends(get_product_service),
):
    """Replace every field of a product; the body id must match the URL"""
    with _service_errors():
        await service.update_product(product_id, data)
    return Response(status_code=204)


@router.delete("/batch", status_code=204, response_class=Response)
async def delete_products_batch(
    ids: Optional[List[int]] = Body(None),
    service: ProductService = Depends(get_product_service),
):
    """Delete the listed products that exist; 404 only if none of them do"""
    with _service_errors():
        await service.delete_products(ids)
    return Response(status_code=204)


@router.delete("/multiple", response_model=List[ProductResponse])
async def delete_multiple_products(
    ids: Optional[List[int]] = Query(None),
    service: ProductService = Depends(get_product_service),
):
    """Query-string form of batch delete that returns the deleted products"""
    with _service_errors():
        return await service.delete_products(ids)


@router.delete("/{product_id}", response_model=ProductResponse)
async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    with _service_errors():
        return await service.delete_product(product_id)
