class BuildValidationError(ValueError):
    """Raised when a build mutation names a category that does not exist.

    The store is left untouched when this is raised.
    """


class LoadFailure(Exception):
    """Raised when a saved build could not be loaded into the store.

    ``not_found`` distinguishes "no such build" from a repository error.
    """

    def __init__(self, build_id: int, message: str, *, not_found: bool = False) -> None:
        super().__init__(message)
        self.build_id = build_id
        self.not_found = not_found
