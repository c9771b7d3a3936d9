# route_kit/errors.py


class RouteError(Exception):
    """Base class for route_kit failures."""


class ConcatenationError(RouteError, ValueError):
    """The first route does not end where the second one starts."""


class EmptyRouteError(RouteError, ValueError):
    """The operation needs at least one segment."""


class RouteDocumentError(RouteError, ValueError):
    """A persisted route document could not be decoded."""
