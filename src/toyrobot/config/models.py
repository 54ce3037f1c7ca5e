"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, toyrobot.toml only contains
overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from toyrobot.domain.commands import Verb


class TableConfig(BaseModel):
    """[table] section: the startup bounds, half-open on the max side."""

    model_config = {"frozen": True}

    xmin: int = 0
    ymin: int = 0
    xmax: int = 10
    ymax: int = 10

    @model_validator(mode="after")
    def _non_empty(self) -> TableConfig:
        if self.xmin >= self.xmax or self.ymin >= self.ymax:
            msg = "table bounds must satisfy xmin < xmax and ymin < ymax"
            raise ValueError(msg)
        return self


class WorldConfig(BaseModel):
    """[world] section."""

    model_config = {"frozen": True}

    robots: list[str] = Field(default_factory=lambda: ["Robbie", "Arthur"])

    @field_validator("robots")
    @classmethod
    def _unique_names(cls, robots: list[str]) -> list[str]:
        if len(set(robots)) != len(robots):
            msg = "robot names must be unique"
            raise ValueError(msg)
        return robots


class ParserConfig(BaseModel):
    """[parser] section."""

    model_config = {"frozen": True}

    strict_numbers: bool = True
    vocabulary: list[Verb] = Field(default_factory=lambda: list(Verb))


class InterpreterConfig(BaseModel):
    """[interpreter] section."""

    model_config = {"frozen": True}

    prompt: str = "? "
    banner: bool = True


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: Path | None = None

