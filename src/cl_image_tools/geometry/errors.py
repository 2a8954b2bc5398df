"""Errors raised while validating and resolving resize geometry."""


class GeometryError(ValueError):
    """Base class for geometry validation errors."""


class InvalidDimension(GeometryError):
    def __init__(self, value: object, axis: str | None = None):
        self.value: object = value
        self.axis: str | None = axis
        where = f" for {axis}" if axis else ""
        super().__init__(f"Invalid dimension{where}: {value!r} (expected a positive integer)")


class MissingDimension(GeometryError):
    def __init__(self, mode: str, axis: str):
        self.mode: str = mode
        self.axis: str = axis
        super().__init__(f"{mode} requires both width and height; {axis} is missing")


class UnknownGravity(GeometryError):
    def __init__(self, token: object):
        self.token: object = token
        super().__init__(f"Unknown gravity: {token!r}")
