"""Unit tests for dataset records and their validation."""

import math

import pytest

from blogcharts.radial.base import (
    ChartVariant,
    DataRecord,
    Dataset,
    DatasetError,
    HoverState,
    RenderedChart,
    UnknownLabelError,
)
from blogcharts.radial.config import FEATURE_IMPORTANCE_DATASET


class TestDatasetValidation:
    def test_duplicate_labels_rejected(self):
        with pytest.raises(DatasetError, match="Duplicate label"):
            Dataset(records=(DataRecord("A", 1), DataRecord("A", 2)))

    def test_negative_value_rejected(self):
        with pytest.raises(DatasetError, match="non-negative"):
            Dataset(records=(DataRecord("A", -1),))

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_value_rejected(self, value):
        with pytest.raises(DatasetError):
            Dataset(records=(DataRecord("A", value),))

    def test_non_numeric_value_rejected(self):
        with pytest.raises(DatasetError, match="must be a number"):
            Dataset(records=(DataRecord("A", "10"),))

    def test_empty_label_rejected(self):
        with pytest.raises(DatasetError):
            Dataset(records=(DataRecord("", 1),))

    def test_dataset_error_is_value_error(self):
        with pytest.raises(ValueError):
            Dataset(records=(DataRecord("A", -5),))

    def test_zero_value_allowed(self):
        dataset = Dataset(records=(DataRecord("A", 0),))
        assert dataset.max_value == 0

    def test_empty_dataset_allowed(self):
        dataset = Dataset()

        assert len(dataset) == 0
        assert dataset.max_value == 0
        assert dataset.sorted_records() == []


class TestDatasetAccess:
    def test_from_mappings(self):
        dataset = Dataset.from_records(
            [{"label": "B", "value": 2, "description": "bee"}, {"label": "A", "value": 1}]
        )

        assert dataset.labels == ["B", "A"]
        assert dataset.get("A").description == ""

    def test_from_mappings_missing_key(self):
        with pytest.raises(DatasetError, match="value"):
            Dataset.from_records([{"label": "A"}])

    def test_sorted_records_alphabetical(self):
        dataset = Dataset.from_records(
            [
                {"label": "beta", "value": 1},
                {"label": "Alpha", "value": 2},
                {"label": "gamma", "value": 3},
            ]
        )

        assert [r.label for r in dataset.sorted_records()] == ["Alpha", "beta", "gamma"]

    def test_sorting_does_not_mutate(self):
        dataset = Dataset.from_records([{"label": "B", "value": 1}, {"label": "A", "value": 2}])

        dataset.sorted_records()

        assert dataset.labels == ["B", "A"]

    def test_get_unknown_label(self):
        with pytest.raises(UnknownLabelError):
            Dataset().get("missing")

    def test_hashable(self, three_record_dataset):
        copy = Dataset(records=tuple(three_record_dataset.records))
        assert hash(copy) == hash(three_record_dataset)

    def test_built_in_dataset(self):
        assert len(FEATURE_IMPORTANCE_DATASET) == 7
        assert FEATURE_IMPORTANCE_DATASET.max_value == 90
        assert FEATURE_IMPORTANCE_DATASET.get("Medium-Term Volume").value == 90


class TestSerialization:
    def test_hover_state_to_dict(self, three_record_dataset):
        state = HoverState(record=three_record_dataset.get("A"), x=1.0, y=2.0)

        assert state.to_dict() == {
            "state": "hovering",
            "record": {"label": "A", "value": 10, "description": "First category"},
            "x": 1.0,
            "y": 2.0,
        }
        assert HoverState.idle().to_dict()["state"] == "idle"

    def test_rendered_chart_to_dict(self):
        chart = RenderedChart(variant=ChartVariant.INTERACTIVE, width=10, height=20)

        data = chart.to_dict()

        assert data["variant"] == "interactive"
        assert data["geometries"] == []
        assert chart.is_empty is True
