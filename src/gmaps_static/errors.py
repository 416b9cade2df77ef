class StaticMapError(RuntimeError):
    pass


class ImageLoadError(StaticMapError):
    """Raised when the map image could not be fetched or decoded."""

    def __init__(self, message: str = "Cannot load image") -> None:
        super().__init__(message)


class MissingParameterError(StaticMapError, ValueError):
    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is required")
        self.field = field
