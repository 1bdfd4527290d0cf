"""Build settings."""

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator, model_validator

from famgraph.classify import DEFAULT_STRATEGY, resolve_strategy
from famgraph.layout import LayoutSettings


class BuildSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    blood_strategy: str | Callable[..., bool] = DEFAULT_STRATEGY
    # give people the pivot cannot reach their own anchor instead of (0, 0)
    separate_components: StrictBool = True
    # "validate" would shadow BaseModel.validate, so it is only the input name
    report_warnings: StrictBool = Field(default=True, alias="validate")

    @model_validator(mode="before")
    @classmethod
    def nest_layout_keys(cls, data: Any) -> Any:
        """Accept layout keys at the top level as well as under "layout"."""
        if not isinstance(data, Mapping):
            return data

        data = dict(data)
        layout = data.get("layout")
        if isinstance(layout, LayoutSettings):
            layout = layout.model_dump()
        layout = dict(layout or {})
        for name in LayoutSettings.model_fields:
            if name in data:
                layout[name] = data.pop(name)
        if layout:
            data["layout"] = layout
        return data

    @field_validator("blood_strategy")
    @classmethod
    def known_strategy(cls, value):
        resolve_strategy(value)
        return value

    @classmethod
    def from_mapping(cls, data: Mapping | None) -> "BuildSettings":
        """Validate a plain mapping such as a JSON "settings" block."""
        return cls.model_validate(dict(data or {}))
