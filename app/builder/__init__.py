from app.builder.compatibility import check_compatibility  # noqa: F401
from app.builder.errors import BuildValidationError, LoadFailure  # noqa: F401
from app.builder.store import BuildLoader, BuildStore  # noqa: F401
from app.builder.summary import BuildSummary, summarize_build  # noqa: F401
from app.builder.types import BuildSnapshot, ComponentCategory, Part, parse_category  # noqa: F401
