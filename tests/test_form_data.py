"""
Tests for form data types.

Tests cover:
- FormData validation and pass-through fields
- Override merging
- SliceIdAndOrFormData parsing
- ChartData serialization
"""

import pytest
from pydantic import ValidationError

from chartclient.query import (
    AnnotationLayerMetadata,
    ChartData,
    FormData,
    SliceIdAndOrFormData,
)


@pytest.fixture
def form_data():
    """Form data with a pass-through field and one annotation layer."""
    return FormData(
        viz_type="bar",
        datasource="3__table",
        row_limit=100,
        annotation_layers=[{"name": "goal", "sourceType": "NATIVE", "value": 7}],
    )


class TestAnnotationLayerMetadata:
    """Tests for AnnotationLayerMetadata."""

    def test_wire_alias(self):
        """sourceType is accepted and dumped by alias."""
        layer = AnnotationLayerMetadata(name="a", sourceType="NATIVE")
        assert layer.source_type == "NATIVE"
        assert layer.model_dump(by_alias=True) == {"name": "a", "sourceType": "NATIVE"}

    def test_source_type_optional(self):
        """Layers default to no source type."""
        assert AnnotationLayerMetadata(name="a").source_type is None


class TestFormData:
    """Tests for FormData."""

    def test_orchestration_fields_optional(self):
        """Missing viz_type or datasource is left for the loaders to reject."""
        form_data = FormData(datasource="ds1")
        assert form_data.viz_type is None
        assert FormData(viz_type="bar").datasource is None

    def test_orchestration_fields_must_be_strings(self):
        """Present orchestration fields are still typed."""
        with pytest.raises(ValidationError):
            FormData(viz_type=["bar"], datasource="ds1")

    def test_extra_fields_pass_through(self, form_data):
        """Unknown fields are kept as extras."""
        assert form_data.extra == {"row_limit": 100}
        assert form_data.row_limit == 100

    def test_nested_layers_parsed(self, form_data):
        """Annotation layers become typed models."""
        layer = form_data.annotation_layers[0]
        assert isinstance(layer, AnnotationLayerMetadata)
        assert layer.source_type == "NATIVE"
        assert layer.model_extra == {"value": 7}

    def test_immutable(self, form_data):
        """FormData cannot be changed in place."""
        with pytest.raises(ValidationError):
            form_data.viz_type = "line"

    def test_equality_by_content(self):
        """Two form data with the same content are equal."""
        assert FormData(viz_type="bar", datasource="ds1", a=1) == FormData(
            viz_type="bar", datasource="ds1", a=1
        )

    def test_to_dict_uses_aliases(self, form_data):
        """Wire dump keeps camelCase layer fields."""
        assert form_data.to_dict()["annotation_layers"] == [
            {"name": "goal", "sourceType": "NATIVE", "value": 7}
        ]

    def test_merge_with_mapping(self, form_data):
        """Mapping overrides replace only the given fields."""
        merged = form_data.merged_with({"row_limit": 10, "color_scheme": "bnbColors"})

        assert merged.row_limit == 10
        assert merged.color_scheme == "bnbColors"
        assert merged.viz_type == "bar"
        assert merged.annotation_layers == form_data.annotation_layers
        assert form_data.row_limit == 100

    def test_merge_is_shallow(self, form_data):
        """A list in the override replaces the stored list entirely."""
        merged = form_data.merged_with({"annotation_layers": [{"name": "other"}]})

        assert merged.annotation_layers == [AnnotationLayerMetadata(name="other")]

    def test_merge_with_form_data_uses_explicit_fields(self, form_data):
        """A FormData override only contributes fields it was given."""
        override = FormData(viz_type="line", datasource="3__table")

        merged = form_data.merged_with(override)

        assert merged.viz_type == "line"
        assert merged.annotation_layers == form_data.annotation_layers
        assert merged.row_limit == 100

    def test_merge_with_none(self, form_data):
        """No override returns the stored form data."""
        assert form_data.merged_with(None) is form_data


class TestSliceIdAndOrFormData:
    """Tests for SliceIdAndOrFormData."""

    def test_empty_is_constructible(self):
        """Missing both fields is only rejected at resolution time."""
        input = SliceIdAndOrFormData()
        assert not input.has_slice_id
        assert input.form_data is None

    @pytest.mark.parametrize(
        "data",
        [
            {"sliceId": 42, "formData": {"viz_type": "bar"}},
            {"slice_id": 42, "form_data": {"viz_type": "bar"}},
        ],
    )
    def test_from_dict(self, data):
        """Both key styles are understood."""
        input = SliceIdAndOrFormData.from_dict(data)
        assert input.slice_id == 42
        assert input.form_data == {"viz_type": "bar"}

    def test_slice_id_zero_counts(self):
        """Slice id 0 is still a slice id."""
        assert SliceIdAndOrFormData(slice_id=0).has_slice_id


class TestChartData:
    """Tests for ChartData."""

    def test_to_dict(self):
        """The aggregate uses the rendering layer's keys."""
        chart = ChartData(
            form_data=FormData(viz_type="bar", datasource="ds1"),
            datasource={"cols": []},
            query_data={"rows": []},
        )

        assert chart.to_dict() == {
            "formData": {"viz_type": "bar", "datasource": "ds1", "annotation_layers": None},
            "datasource": {"cols": []},
            "queryData": {"rows": []},
            "annotationData": {},
        }
