"""
Categories API endpoints (read-only)
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from shop_api.database import get_db
from shop_api.exceptions import CategoryNotFoundError, StoreError
from shop_api.schemas import CategoryResponse, CategoryDetailResponse
from shop_api.services.category_service import CategoryService

router = APIRouter()


@router.get("/", response_model=List[CategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    """List all categories"""
    try:
        return await CategoryService(db).list_categories()
    except StoreError:
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{category_id}", response_model=CategoryDetailResponse)
async def get_category(category_id: int, db: AsyncSession = Depends(get_db)):
    """Get a single category with its products"""
    try:
        return await CategoryService(db).get_category(category_id)
    except CategoryNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError:
        raise HTTPException(status_code=500, detail="Internal server error")
