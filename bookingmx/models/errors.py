from __future__ import annotations


class GraphError(ValueError):
    """Base class for errors raised while mutating or querying a Graph."""


class InvalidCityNameError(GraphError):
    def __init__(self, name: object) -> None:
        super().__init__(f"Invalid city name: {name!r}")
        self.name = name


class UnknownCityError(GraphError):
    def __init__(self, city: object) -> None:
        super().__init__(f"Unknown city: {city!r}")
        self.city = city


class InvalidDistanceError(GraphError):
    def __init__(self, distance: object) -> None:
        super().__init__(f"Invalid distance: {distance!r}")
        self.distance = distance


class DatasetError(GraphError):
    """
    A dataset failed validation before the graph could be built.
    reason – one of the codes from bookingmx.models.validation.
    """

    def __init__(self, reason: str, source: object = None) -> None:
        where = f" ({source})" if source is not None else ""
        super().__init__(f"Invalid dataset{where}: {reason}")
        self.reason = reason
        self.source = source
