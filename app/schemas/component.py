from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from app.builder.types import ComponentCategory

# bool first so JSON true/false is not coerced to 1/0
SpecValue = Union[bool, int, float, str]


def _lower(value):
    return value.strip().lower() if isinstance(value, str) else value


def _check_url(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.startswith(("http://", "https://")):
        raise ValueError("purchase_url must be a valid http(s) URL")
    return value


class ComponentCreate(BaseModel):
    name: str = Field(min_length=1)
    category: ComponentCategory
    price: float = Field(ge=0)
    image: str = ""
    description: str = ""
    weight: Optional[float] = Field(default=None, ge=0)
    in_stock: bool = True
    specifications: dict[str, SpecValue] = {}
    compatible_with: list[str] = []
    purchase_url: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v):
        return _lower(v)

    @field_validator("purchase_url")
    @classmethod
    def validate_purchase_url(cls, v: Optional[str]) -> Optional[str]:
        return _check_url(v)


class ComponentUpdate(BaseModel):
    """Partial update.  ``category`` may be repeated but not changed."""

    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[ComponentCategory] = None
    price: Optional[float] = Field(default=None, ge=0)
    image: Optional[str] = None
    description: Optional[str] = None
    weight: Optional[float] = Field(default=None, ge=0)
    in_stock: Optional[bool] = None
    specifications: Optional[dict[str, SpecValue]] = None
    compatible_with: Optional[list[str]] = None
    purchase_url: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v):
        return _lower(v)

    @field_validator("purchase_url")
    @classmethod
    def validate_purchase_url(cls, v: Optional[str]) -> Optional[str]:
        return _check_url(v)


class ComponentResponse(BaseModel):
    id: int
    name: str
    category: ComponentCategory
    price: float
    image: str
    description: str
    weight: Optional[float]
    in_stock: bool
    specifications: dict[str, SpecValue]
    compatible_with: list[str]
    purchase_url: Optional[str]

    model_config = {"from_attributes": True}
