# route_kit/app/build.py
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from route_kit.app.protocols import LocatedObjectIndex
from route_kit.config.models import RouteKitModel
from route_kit.domain.entities.route import Route
from route_kit.domain.mechanics.mechanics_sampling import RouteSampler
from route_kit.io.route_logging import emit, get_logger
from route_kit.runtime.registries import make_index


@dataclass
class App:
    model: RouteKitModel
    log: logging.Logger

    def new_index(self) -> LocatedObjectIndex:
        return make_index(self.model.index)

    def sample(self, route: Route, interval_m: float | None = None) -> RouteSampler:
        if interval_m is None:
            interval_m = self.model.sampling.interval_m
        return RouteSampler(route, interval_m)


def build(cfg: RouteKitModel | Mapping | None = None) -> App:
    # 0) Validate config
    if cfg is None:
        model = RouteKitModel()
    else:
        model = cfg if isinstance(cfg, RouteKitModel) else RouteKitModel.model_validate(cfg)

    # 1) Logging
    level = "DEBUG" if model.log.debug else model.log.level
    log = get_logger(level=level)

    emit(log, "INFO", "build", index=model.index.kind, interval_m=model.sampling.interval_m)
    return App(model=model, log=log)
