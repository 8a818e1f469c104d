"""Components router: catalog listing and catalog management."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.builder.types import parse_category
from app.database import get_db
from app.schemas.component import ComponentCreate, ComponentResponse, ComponentUpdate
from app.services.catalog_service import (
    create_component,
    delete_component,
    get_component,
    list_components,
    update_component,
)

router = APIRouter(prefix="/components", tags=["components"])


@router.get("", response_model=list[ComponentResponse])
async def get_components(
    category: Optional[str] = None,
    search: Optional[str] = None,
    max_price: Optional[float] = Query(default=None, ge=0),
    max_weight: Optional[float] = Query(default=None, ge=0),
    in_stock_only: bool = False,
    sort: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    try:
        parsed_category = parse_category(category) if category is not None else None
        return await list_components(
            db,
            category=parsed_category,
            search=search,
            max_price=max_price,
            max_weight=max_weight,
            in_stock_only=in_stock_only,
            sort=sort,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/{component_id}", response_model=ComponentResponse)
async def get_component_info(component_id: int, db: AsyncSession = Depends(get_db)):
    component = await get_component(db, component_id)
    if component is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Component not found")
    return component


@router.post("", response_model=ComponentResponse, status_code=status.HTTP_201_CREATED)
async def create_new_component(body: ComponentCreate, db: AsyncSession = Depends(get_db)):
    return await create_component(db, body.model_dump())


@router.put("/{component_id}", response_model=ComponentResponse)
async def update_existing_component(
    component_id: int,
    body: ComponentUpdate,
    db: AsyncSession = Depends(get_db),
):
    try:
        component = await update_component(db, component_id, body.model_dump(exclude_unset=True))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if component is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Component not found")
    return component


@router.delete("/{component_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_existing_component(component_id: int, db: AsyncSession = Depends(get_db)):
    if not await delete_component(db, component_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Component not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
