"""
Form data and chart aggregate types.

FormData is the open-ended configuration record for one chart. Only the
fields the orchestration core reads are declared; everything else rides
along as pydantic extras and reaches the query builders untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

AnnotationData = dict[str, Any]
"""Annotation results keyed by layer name."""


class AnnotationLayerMetadata(BaseModel):
    """
    One annotation layer requested by a chart.

    A layer without `source_type` needs no query and resolves to `{}`.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    name: str = Field(..., description="Layer name, unique within a chart")
    source_type: str | None = Field(None, alias="sourceType", description="Annotation source type")


class FormData(BaseModel):
    """
    Configuration record for one chart.

    Immutable: use `merged_with` to derive an overridden copy.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    viz_type: str | None = Field(None, description="Chart type, selects the query builder")
    datasource: str | None = Field(None, description="Datasource key, e.g. '3__table'")
    annotation_layers: list[AnnotationLayerMetadata] | None = Field(
        None, description="Annotation overlays"
    )

    @property
    def extra(self) -> dict[str, Any]:
        """Builder-specific pass-through fields."""
        return dict(self.model_extra or {})

    def to_dict(self, *, explicit_only: bool = False) -> dict[str, Any]:
        """
        Dump to the wire format.

        Args:
            explicit_only: Only include fields that were explicitly given
        """
        if explicit_only:
            present = set(self.model_fields_set) | set(self.model_extra or {})
            return self.model_dump(by_alias=True, include=present)
        return self.model_dump(by_alias=True)

    def merged_with(self, override: FormData | Mapping[str, Any] | None) -> FormData:
        """
        Return a copy with `override` applied on top.

        The merge is shallow: every field present in the override replaces
        the stored one, everything else is kept.
        """
        if override is None:
            return self

        if isinstance(override, FormData):
            patch = override.to_dict(explicit_only=True)
        else:
            patch = dict(override)

        return FormData.model_validate({**self.to_dict(), **patch})


@dataclass(frozen=True, slots=True)
class SliceIdAndOrFormData:
    """
    Input to chart loading: a stored slice id, explicit form data, or both.

    Having neither is not rejected here; resolution fails with
    InvalidInputError instead.
    """

    slice_id: int | None = None
    form_data: FormData | Mapping[str, Any] | None = None

    @property
    def has_slice_id(self) -> bool:
        return self.slice_id is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SliceIdAndOrFormData:
        """Accept both camelCase (`sliceId`, `formData`) and snake_case keys."""
        slice_id = data.get("sliceId", data.get("slice_id"))
        form_data = data.get("formData", data.get("form_data"))
        return cls(slice_id=slice_id, form_data=form_data)


@dataclass(frozen=True, slots=True)
class ChartData:
    """Everything needed to render one chart."""

    form_data: FormData
    datasource: Any
    query_data: Any
    annotation_data: AnnotationData = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Aggregate in the shape the rendering layer expects."""
        return {
            "formData": self.form_data.to_dict(),
            "datasource": self.datasource,
            "queryData": self.query_data,
            "annotationData": self.annotation_data,
        }
