# route_kit/domain/tags.py
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Annotated

from pydantic import BeforeValidator


@dataclass
class Tag:
    key: str
    value: str

    def clone(self) -> "Tag":
        return Tag(self.key, self.value)

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


@dataclass
class Metric:
    key: str
    value: float

    def clone(self) -> "Metric":
        return Metric(self.key, self.value)


def none_as_empty(v):
    return [] if v is None else v


# documents may carry null for an absent collection
TagList = Annotated[list[Tag], BeforeValidator(none_as_empty)]
MetricList = Annotated[list[Metric], BeforeValidator(none_as_empty)]


# ---------------- conversions ------------------------


def tags_from_mapping(tags: Mapping[str, str] | None) -> list[Tag]:
    return [Tag(k, v) for k, v in (tags or {}).items()]


def tags_from_pairs(pairs: Iterable[tuple[str, str]] | None) -> list[Tag]:
    return [Tag(k, v) for k, v in (pairs or ())]


def tags_to_pairs(tags: Iterable[Tag] | None) -> list[tuple[str, str]]:
    return [(t.key, t.value) for t in (tags or ())]


def metrics_from_mapping(metrics: Mapping[str, float] | None) -> list[Metric]:
    return [Metric(k, float(v)) for k, v in (metrics or {}).items()]


def metrics_to_pairs(metrics: Iterable[Metric] | None) -> list[tuple[str, float]]:
    return [(m.key, m.value) for m in (metrics or ())]


# ---------------- lookups ----------------------------


def first_value(tags: Iterable[Tag] | None, key: str) -> str | None:
    for t in tags or ():
        if t.key == key:
            return t.value
    return None


def values(tags: Iterable[Tag] | None, key: str) -> list[str]:
    return [t.value for t in (tags or ()) if t.key == key]


# ---------------- equality / copies -------------------


def tags_equal(a: list[Tag] | None, b: list[Tag] | None) -> bool:
    """
    Element-by-element, order-sensitive comparison.
    None and an empty list are the same thing on either side.
    """
    a, b = a or [], b or []
    if len(a) != len(b):
        return False
    return all(x.key == y.key and x.value == y.value for x, y in zip(a, b))


def clone_tags(tags: list[Tag] | None) -> list[Tag]:
    return [t.clone() for t in (tags or ())]


def clone_metrics(metrics: list[Metric] | None) -> list[Metric]:
    return [m.clone() for m in (metrics or ())]
