"""Build service: saved build records and their resolution into snapshots.

A saved build stores component ids only.  get_build_with_components turns
one back into a BuildSnapshot: a singular id that no longer exists resolves
to an empty slot, and accessory ids that no longer exist are dropped.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.builder.types import SINGULAR_CATEGORIES, BuildSnapshot, Part, ResolvedBuild
from app.models.build import Build
from app.services.catalog_service import get_components_by_ids


async def create_build(
    db: AsyncSession,
    name: str,
    component_ids: dict[str, Any],
    created_at: datetime | None = None,
) -> Build:
    build = Build(
        name=name,
        component_ids=component_ids,
        created_at=created_at or datetime.now(timezone.utc),
    )
    db.add(build)
    await db.commit()
    await db.refresh(build)
    return build


async def list_builds(db: AsyncSession) -> list[Build]:
    result = await db.execute(select(Build).order_by(Build.id))
    return list(result.scalars().all())


async def get_build(db: AsyncSession, build_id: int) -> Build | None:
    result = await db.execute(select(Build).where(Build.id == build_id))
    return result.scalar_one_or_none()


async def update_build(
    db: AsyncSession,
    build_id: int,
    name: str | None = None,
    component_ids: dict[str, Any] | None = None,
) -> Build | None:
    build = await get_build(db, build_id)
    if build is None:
        return None
    if name is not None:
        build.name = name
    if component_ids is not None:
        build.component_ids = component_ids
    await db.commit()
    await db.refresh(build)
    return build


async def delete_build(db: AsyncSession, build_id: int) -> bool:
    build = await get_build(db, build_id)
    if build is None:
        return False
    await db.delete(build)
    await db.commit()
    return True


def _referenced_ids(component_ids: dict[str, Any]) -> tuple[dict[str, int], list[int]]:
    """Split a stored mapping into ({category: id}, [accessory ids]), skipping junk."""
    singular: dict[str, int] = {}
    for category in SINGULAR_CATEGORIES:
        value = component_ids.get(category.value)
        if isinstance(value, int) and not isinstance(value, bool):
            singular[category.value] = value
    accessories = component_ids.get("accessories")
    if not isinstance(accessories, list):
        accessories = []
    accessory_ids: list[int] = []
    for a in accessories:
        # Snapshots never hold the same accessory twice
        if isinstance(a, int) and not isinstance(a, bool) and a not in accessory_ids:
            accessory_ids.append(a)
    return singular, accessory_ids


async def get_build_with_components(db: AsyncSession, build_id: int) -> ResolvedBuild | None:
    """Return the build with every referenced component looked up, or None."""
    build = await get_build(db, build_id)
    if build is None:
        return None

    singular, accessory_ids = _referenced_ids(build.component_ids or {})
    found = await get_components_by_ids(db, list(singular.values()) + accessory_ids)

    slots = {
        category: Part.from_model(found[cid]) if cid in found else None
        for category, cid in singular.items()
    }
    accessories = tuple(Part.from_model(found[aid]) for aid in accessory_ids if aid in found)

    return ResolvedBuild(
        id=build.id,
        name=build.name,
        created_at=build.created_at,
        components=BuildSnapshot(accessories=accessories, **slots),
    )


class SessionBuildLoader:
    """BuildLoader that opens a fresh session per lookup."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_build_with_components(self, build_id: int) -> ResolvedBuild | None:
        async with self._session_factory() as db:
            return await get_build_with_components(db, build_id)
