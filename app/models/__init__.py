from app.models.base import Base  # noqa: F401
from app.models.build import Build  # noqa: F401
from app.models.component import Component, ComponentCategory  # noqa: F401
