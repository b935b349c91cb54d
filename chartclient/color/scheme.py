"""
Color scheme value holder.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ColorScheme(BaseModel):
    """
    A named list of colors.

    `label` falls back to `id` when not given.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique scheme identifier")
    colors: list[str] = Field(..., description="Ordered color values")
    label: str = Field("", description="Human-readable name")
    description: str = Field("", description="Scheme description")

    @model_validator(mode="before")
    @classmethod
    def _default_label(cls, data):
        if isinstance(data, dict) and not data.get("label"):
            data = {**data, "label": data.get("id")}
        return data
