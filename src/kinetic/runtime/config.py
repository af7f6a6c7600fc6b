"""Frame runner configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RenderConfig(BaseModel):
    """Which times the frame runner samples.

    Frame ``i`` is sampled at ``start + i * step``. A negative step plays
    the animation backwards. The runner never sleeps between frames, so
    ``step`` is animation time, not wall-clock time.
    """

    model_config = ConfigDict(frozen=True)

    start: float = Field(default=0.0, allow_inf_nan=False)
    step: float = Field(default=1.0 / 30.0, allow_inf_nan=False)
    frames: int = Field(default=60, ge=1)

    @field_validator("step")
    @classmethod
    def _step_not_zero(cls, value: float) -> float:
        if value == 0.0:
            raise ValueError("step must be non-zero")
        return value
