"""Catalog service: component records and catalog queries.

Responsibilities:
  - List components with the storefront filters (category, search text,
    price and weight ceilings, stock) and sort orders
  - Create, update and delete catalog components
  - Seed the default catalog into an empty database
"""

import logging
from typing import Any

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.builder.types import ComponentCategory
from app.data.catalog import DEFAULT_CATALOG
from app.models.component import Component

logger = logging.getLogger(__name__)

_NULLABLE_FIELDS = {"weight", "purchase_url"}

SORT_OPTIONS = {
    "price-asc": (Component.price.asc(), Component.id.asc()),
    "price-desc": (Component.price.desc(), Component.id.asc()),
    "name-asc": (Component.name.asc(), Component.id.asc()),
    "name-desc": (Component.name.desc(), Component.id.asc()),
}


async def list_components(
    db: AsyncSession,
    category: ComponentCategory | None = None,
    search: str | None = None,
    max_price: float | None = None,
    max_weight: float | None = None,
    in_stock_only: bool = False,
    sort: str | None = None,
) -> list[Component]:
    """Return catalog components matching every given filter.

    Components with no known weight always pass the weight filter.
    Raises ValueError for an unknown sort option.
    """
    query = select(Component)
    if category is not None:
        query = query.where(Component.category == category)
    if search:
        pattern = f"%{search.lower()}%"
        query = query.where(
            or_(
                func.lower(Component.name).like(pattern),
                func.lower(Component.description).like(pattern),
            )
        )
    if max_price is not None:
        query = query.where(Component.price <= max_price)
    if max_weight is not None:
        query = query.where(or_(Component.weight.is_(None), Component.weight <= max_weight))
    if in_stock_only:
        query = query.where(Component.in_stock.is_(True))

    if sort is None:
        query = query.order_by(Component.id)
    elif sort in SORT_OPTIONS:
        query = query.order_by(*SORT_OPTIONS[sort])
    else:
        raise ValueError(
            f"Unknown sort option '{sort}'; expected one of {', '.join(SORT_OPTIONS)}"
        )

    result = await db.execute(query)
    return list(result.scalars().all())


async def get_component(db: AsyncSession, component_id: int) -> Component | None:
    result = await db.execute(select(Component).where(Component.id == component_id))
    return result.scalar_one_or_none()


async def get_components_by_ids(db: AsyncSession, component_ids: list[int]) -> dict[int, Component]:
    """Return {id: Component} for the ids that exist; unknown ids are omitted."""
    if not component_ids:
        return {}
    result = await db.execute(select(Component).where(Component.id.in_(set(component_ids))))
    return {c.id: c for c in result.scalars().all()}


async def create_component(db: AsyncSession, values: dict[str, Any]) -> Component:
    component = Component(**values)
    db.add(component)
    await db.commit()
    await db.refresh(component)
    logger.info("Created component %s (%s)", component.id, component.name)
    return component


async def update_component(
    db: AsyncSession, component_id: int, changes: dict[str, Any]
) -> Component | None:
    """Apply ``changes`` to a component.  Returns None if it does not exist.

    The category of a component is fixed at creation; raises ValueError when
    ``changes`` tries to move it to another category.
    """
    component = await get_component(db, component_id)
    if component is None:
        return None

    new_category = changes.get("category")
    if new_category is not None and ComponentCategory(new_category) != component.category:
        raise ValueError("A component's category cannot be changed")

    for key, value in changes.items():
        if key in ("id", "category"):
            continue
        # Only weight and purchase_url may be cleared
        if value is None and key not in _NULLABLE_FIELDS:
            continue
        setattr(component, key, value)
    await db.commit()
    await db.refresh(component)
    return component


async def delete_component(db: AsyncSession, component_id: int) -> bool:
    component = await get_component(db, component_id)
    if component is None:
        return False
    await db.delete(component)
    await db.commit()
    return True


async def seed_catalog(db: AsyncSession) -> int:
    """Insert the default catalog if there are no components yet.

    Returns the number of components inserted (0 if the table was not empty).
    """
    count = await db.scalar(select(func.count()).select_from(Component))
    if count:
        return 0
    for values in DEFAULT_CATALOG:
        db.add(Component(**values))
    await db.commit()
    logger.info("Seeded %d catalog components", len(DEFAULT_CATALOG))
    return len(DEFAULT_CATALOG)
