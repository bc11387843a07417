class RoverError(Exception):
    pass


class MapReadError(RoverError):
    """The map source could not be opened or read to completion."""

    def __init__(self, source, reason: str = "", *args: object):
        super().__init__(f"cannot read map from {source!r}: {reason}", *args)
        self.source = source
        self.reason = reason


class InputValidationError(RoverError):
    """Coordinates, goal index or command tokens outside what the map accepts."""
