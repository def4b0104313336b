from fastapi import APIRouter, Depends

from schemas.product import CatalogProduct
from schemas.responses import ApiResponse
from services.catalog import get_product_catalog

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"ok": True}


@router.get("/", response_model=ApiResponse[list[str]])
def catalog_names(catalog: tuple[CatalogProduct, ...] = Depends(get_product_catalog)):
    return ApiResponse(data=[p.name for p in catalog])
