"""Builds router: saved build records."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.build import (
    BuildCreate,
    BuildResponse,
    BuildUpdate,
    BuildWithComponentsResponse,
)
from app.services.build_service import (
    create_build,
    delete_build,
    get_build,
    get_build_with_components,
    list_builds,
    update_build,
)

router = APIRouter(prefix="/builds", tags=["builds"])


@router.get("", response_model=list[BuildResponse])
async def get_builds(db: AsyncSession = Depends(get_db)):
    return await list_builds(db)


@router.get("/{build_id}", response_model=BuildResponse)
async def get_build_info(build_id: int, db: AsyncSession = Depends(get_db)):
    build = await get_build(db, build_id)
    if build is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Build not found")
    return build


@router.get("/{build_id}/with-components", response_model=BuildWithComponentsResponse)
async def get_build_components(build_id: int, db: AsyncSession = Depends(get_db)):
    resolved = await get_build_with_components(db, build_id)
    if resolved is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Build not found")
    return BuildWithComponentsResponse.model_validate(resolved)


@router.post("", response_model=BuildResponse, status_code=status.HTTP_201_CREATED)
async def create_new_build(body: BuildCreate, db: AsyncSession = Depends(get_db)):
    return await create_build(
        db,
        name=body.name,
        component_ids=body.component_ids.model_dump(),
        created_at=body.created_at,
    )


@router.put("/{build_id}", response_model=BuildResponse)
async def update_existing_build(
    build_id: int,
    body: BuildUpdate,
    db: AsyncSession = Depends(get_db),
):
    build = await update_build(
        db,
        build_id,
        name=body.name,
        component_ids=body.component_ids.model_dump() if body.component_ids else None,
    )
    if build is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Build not found")
    return build


@router.delete("/{build_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_existing_build(build_id: int, db: AsyncSession = Depends(get_db)):
    if not await delete_build(db, build_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Build not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
