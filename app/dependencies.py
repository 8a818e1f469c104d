from fastapi import Request

from app.builder.store import BuildStore


def get_build_store(request: Request) -> BuildStore:
    """Return the process-wide build store created at application startup."""
    return request.app.state.build_store
