"""Build store: single owner of the current build snapshot.

Responsibilities:
  - Add, replace and remove parts one at a time (synchronous, never partial)
  - Reset to the empty build
  - Load a saved build by id through an injected BuildLoader

Every mutation builds a complete new BuildSnapshot and swaps it in with one
assignment, then notifies subscribers.  Nothing ever observes a half-applied
change.

load_build_by_id awaits the loader before touching state.  Mutations made
while it is suspended apply to the snapshot of that moment and are then
overwritten when the load commits; there is no cancellation and no merge.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Protocol

from app.builder.errors import BuildValidationError, LoadFailure
from app.builder.types import (
    EMPTY_SNAPSHOT,
    BuildSnapshot,
    ComponentCategory,
    Part,
    ResolvedBuild,
    parse_category,
)

logger = logging.getLogger(__name__)

Listener = Callable[[BuildSnapshot], None]


class BuildLoader(Protocol):
    async def get_build_with_components(self, build_id: int) -> ResolvedBuild | None:
        ...


class BuildStore:
    def __init__(self, loader: BuildLoader | None = None) -> None:
        self._loader = loader
        self._snapshot: BuildSnapshot = EMPTY_SNAPSHOT
        self._listeners: list[Listener] = []

    @property
    def snapshot(self) -> BuildSnapshot:
        return self._snapshot

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(snapshot)`` after every commit.  Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, snapshot: BuildSnapshot) -> BuildSnapshot:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot

    def _category(self, category: str | ComponentCategory) -> ComponentCategory:
        try:
            return parse_category(category)
        except BuildValidationError:
            logger.warning("Unknown component category: %r", category)
            raise

    # ------------------------------------------------------------------
    # Synchronous mutations
    # ------------------------------------------------------------------

    def add_component(self, category: str | ComponentCategory, component: Part) -> BuildSnapshot:
        """Put ``component`` into the build under ``category``.

        Singular categories replace the current occupant.  Accessories replace
        any entry with the same id and go to the end of the list.  The part's
        own ``category`` field is not compared with ``category``.
        """
        cat = self._category(category)
        logger.debug("Adding component %s (%s) as %s", component.id, component.name, cat.value)

        current = self._snapshot
        if cat == ComponentCategory.accessory:
            others = tuple(a for a in current.accessories if a.id != component.id)
            updated = dataclasses.replace(current, accessories=others + (component,))
        else:
            updated = dataclasses.replace(current, **{cat.value: component})
        return self._commit(updated)

    def remove_component(
        self, category: str | ComponentCategory, component_id: int | None = None
    ) -> BuildSnapshot:
        """Clear a singular slot, one accessory (by id) or every accessory."""
        cat = self._category(category)
        logger.debug("Removing %s (component_id=%s)", cat.value, component_id)

        current = self._snapshot
        if cat == ComponentCategory.accessory:
            if component_id is None:
                remaining: tuple[Part, ...] = ()
            else:
                remaining = tuple(a for a in current.accessories if a.id != component_id)
            updated = dataclasses.replace(current, accessories=remaining)
        else:
            updated = dataclasses.replace(current, **{cat.value: None})
        return self._commit(updated)

    def reset_build(self) -> BuildSnapshot:
        return self._commit(EMPTY_SNAPSHOT)

    def load_build(self, snapshot: BuildSnapshot) -> BuildSnapshot:
        """Replace the whole build with ``snapshot``."""
        return self._commit(snapshot)

    # ------------------------------------------------------------------
    # Asynchronous load
    # ------------------------------------------------------------------

    async def load_build_by_id(self, build_id: int) -> ResolvedBuild:
        """Fetch saved build ``build_id`` and make it the current build.

        Raises LoadFailure if the loader fails or has no such build; the
        current snapshot is left exactly as it was.
        """
        if self._loader is None:
            raise LoadFailure(build_id, "No build loader configured")

        try:
            resolved = await self._loader.get_build_with_components(build_id)
        except Exception as exc:
            logger.error("Failed to load build %s: %s", build_id, exc)
            raise LoadFailure(build_id, f"Failed to load build {build_id}") from exc

        if resolved is None:
            logger.error("Failed to load build %s: not found", build_id)
            raise LoadFailure(build_id, f"Build {build_id} not found", not_found=True)

        self.load_build(resolved.components)
        logger.info("Loaded build %s (%s)", resolved.id, resolved.name)
        return resolved
