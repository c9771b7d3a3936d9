from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- SPATIAL INDEX ---------------------


class IndexNaiveModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["naive"] = "naive"


class IndexGridModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["grid"] = "grid"
    cell_deg: float = 0.01  # ~1.1 km of latitude

    @field_validator("cell_deg")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if not v > 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


IndexUnion = Annotated[IndexNaiveModel | IndexGridModel, Field(discriminator="kind")]


# ----------------- SAMPLING ---------------------


class SamplingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    interval_m: float = Field(default=50.0, gt=0)


# ------------------------------------------------------------------


class RouteKitModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    log: LogModel = LogModel()
    index: IndexUnion = Field(default_factory=IndexNaiveModel)
    sampling: SamplingModel = SamplingModel()
