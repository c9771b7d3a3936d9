# src/route_kit/io/documents.py
import logging

from pydantic import TypeAdapter, ValidationError

from route_kit.domain.entities.route import Route
from route_kit.errors import RouteDocumentError
from route_kit.io.route_logging import emit

log = logging.getLogger("route_kit.documents")

_ROUTE = TypeAdapter(Route)


def route_to_dict(route: Route) -> dict:
    return _ROUTE.dump_python(route, mode="json")


def route_from_dict(data: dict) -> Route:
    try:
        return _ROUTE.validate_python(data)
    except ValidationError as e:
        emit(log, "ERROR", "route_decode_failed", errors=e.error_count())
        raise RouteDocumentError(str(e)) from e


def encode_route(route: Route, *, indent: int | None = None) -> bytes:
    return _ROUTE.dump_json(route, indent=indent)


def decode_route(data: bytes | str) -> Route:
    try:
        return _ROUTE.validate_json(data)
    except ValidationError as e:
        emit(log, "ERROR", "route_decode_failed", errors=e.error_count())
        raise RouteDocumentError(str(e)) from e
