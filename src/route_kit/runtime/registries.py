# runtime/registries.py
from collections.abc import Callable

from route_kit.app.protocols import LocatedObjectIndex
from route_kit.config.models import IndexGridModel, IndexNaiveModel, IndexUnion
from route_kit.domain.spatial.located_index import GridLocatedIndex, NaiveLocatedIndex

IndexFactory = Callable[[IndexUnion], LocatedObjectIndex]

_index_registry: dict[str, IndexFactory] = {}


# ------------------- Spatial index registries ---------------------------


def register_index(kind: str):
    def deco(fn: IndexFactory):
        _index_registry[kind] = fn
        return fn

    return deco


def make_index(cfg: IndexUnion) -> LocatedObjectIndex:
    try:
        factory = _index_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown index kind {cfg.kind!r}") from None
    return factory(cfg)


@register_index("naive")
def _make_naive(cfg: IndexNaiveModel):
    return NaiveLocatedIndex()


@register_index("grid")
def _make_grid(cfg: IndexGridModel):
    return GridLocatedIndex(cell_deg=cfg.cell_deg)
