"""Current build router: drives the process-wide BuildStore.

Every endpoint returns the snapshot after the operation together with its
summary (totals, missing categories, compatibility warnings).
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.builder.errors import BuildValidationError, LoadFailure
from app.builder.store import BuildStore
from app.builder.summary import summarize_build
from app.builder.types import BuildSnapshot, Part
from app.database import get_db
from app.dependencies import get_build_store
from app.schemas.build import (
    AddComponentRequest,
    BuildResponse,
    CurrentBuildResponse,
    SaveBuildRequest,
    SnapshotResponse,
    SummaryResponse,
)
from app.services.build_service import create_build
from app.services.catalog_service import get_component

router = APIRouter(prefix="/current-build", tags=["current-build"])


def _current_build_response(snapshot: BuildSnapshot) -> CurrentBuildResponse:
    return CurrentBuildResponse(
        build=SnapshotResponse.model_validate(snapshot),
        summary=SummaryResponse.model_validate(summarize_build(snapshot)),
    )


@router.get("", response_model=CurrentBuildResponse)
async def get_current_build(store: BuildStore = Depends(get_build_store)):
    return _current_build_response(store.snapshot)


@router.post("/components", response_model=CurrentBuildResponse)
async def add_to_current_build(
    body: AddComponentRequest,
    db: AsyncSession = Depends(get_db),
    store: BuildStore = Depends(get_build_store),
):
    component = await get_component(db, body.component_id)
    if component is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Component not found")
    try:
        snapshot = store.add_component(body.category, Part.from_model(component))
    except BuildValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return _current_build_response(snapshot)


@router.delete("/components/{category}", response_model=CurrentBuildResponse)
async def remove_from_current_build(
    category: str,
    component_id: Optional[int] = None,
    store: BuildStore = Depends(get_build_store),
):
    try:
        snapshot = store.remove_component(category, component_id)
    except BuildValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return _current_build_response(snapshot)


@router.post("/reset", response_model=CurrentBuildResponse)
async def reset_current_build(store: BuildStore = Depends(get_build_store)):
    return _current_build_response(store.reset_build())


@router.post("/load/{build_id}", response_model=CurrentBuildResponse)
async def load_saved_build(build_id: int, store: BuildStore = Depends(get_build_store)):
    try:
        await store.load_build_by_id(build_id)
    except LoadFailure as exc:
        if exc.not_found:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Build not found")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    return _current_build_response(store.snapshot)


@router.post("/save", response_model=BuildResponse, status_code=status.HTTP_201_CREATED)
async def save_current_build(
    body: SaveBuildRequest,
    db: AsyncSession = Depends(get_db),
    store: BuildStore = Depends(get_build_store),
):
    now = datetime.now()
    name = body.name or f"My Build {now.strftime('%Y-%m-%d %H:%M:%S')}"
    return await create_build(db, name=name, component_ids=store.snapshot.component_ids())
