from __future__ import annotations

from dataclasses import dataclass, field

from app.builder.compatibility import check_compatibility
from app.builder.types import SINGULAR_CATEGORIES, BuildSnapshot


@dataclass
class BuildSummary:
    total_price: float
    total_weight: float
    missing: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing


def summarize_build(snapshot: BuildSnapshot) -> BuildSummary:
    """Totals, missing singular categories and compatibility warnings."""
    parts = snapshot.parts()
    total_price = round(sum(p.price or 0 for p in parts), 2)
    # Parts without a published weight do not count towards the total
    total_weight = round(sum(p.weight for p in parts if p.weight is not None), 2)
    missing = [c.value for c in SINGULAR_CATEGORIES if snapshot.slot(c) is None]
    return BuildSummary(
        total_price=total_price,
        total_weight=total_weight,
        missing=missing,
        warnings=check_compatibility(snapshot),
    )
