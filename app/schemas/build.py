from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.component import ComponentResponse


class ComponentIds(BaseModel):
    """Component ids of a saved build, one per singular category plus accessories."""

    drone: Optional[int] = None
    goggles: Optional[int] = None
    radio: Optional[int] = None
    battery: Optional[int] = None
    accessories: list[int] = []


class BuildCreate(BaseModel):
    name: str = Field(min_length=1)
    created_at: Optional[datetime] = None
    component_ids: ComponentIds = ComponentIds()


class BuildUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    component_ids: Optional[ComponentIds] = None


class BuildResponse(BaseModel):
    id: int
    name: str
    created_at: datetime
    component_ids: ComponentIds

    model_config = {"from_attributes": True}


class SnapshotResponse(BaseModel):
    drone: Optional[ComponentResponse] = None
    goggles: Optional[ComponentResponse] = None
    radio: Optional[ComponentResponse] = None
    battery: Optional[ComponentResponse] = None
    accessories: list[ComponentResponse] = []

    model_config = {"from_attributes": True}


class BuildWithComponentsResponse(BaseModel):
    id: int
    name: str
    created_at: datetime
    components: SnapshotResponse

    model_config = {"from_attributes": True}


class SummaryResponse(BaseModel):
    total_price: float
    total_weight: float
    missing: list[str]
    warnings: list[str]
    is_complete: bool

    model_config = {"from_attributes": True}


class CurrentBuildResponse(BaseModel):
    build: SnapshotResponse
    summary: SummaryResponse


class AddComponentRequest(BaseModel):
    # Validated by the build store so unknown categories are reported uniformly
    category: str
    component_id: int


class SaveBuildRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
