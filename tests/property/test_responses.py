"""Property-based tests for response models.

Property 2: Result Snapshot Serialization
"""

import pytest
from hypothesis import given, settings, strategies as st
from pydantic import ValidationError

from bfl_flux.models.enums import ResultStatus
from bfl_flux.models.responses import GetResultResponse, ImageGenerationResponse
from bfl_flux.utils.errors import InvalidStatusError

SNAPSHOT_KEYS = {"id", "status", "result", "progress", "details", "preview"}

json_scalars = st.one_of(st.text(max_size=20), st.integers(), st.booleans())
small_dicts = st.dictionaries(st.text(min_size=1, max_size=10), json_scalars, max_size=4)


@st.composite
def raw_result_payload(draw: st.DrawFn) -> dict:
    """Raw get_result payloads with a random subset of optional fields."""
    data = {
        "id": draw(st.text(min_size=1, max_size=20)),
        "status": draw(st.sampled_from([s.value for s in ResultStatus])),
    }
    if draw(st.booleans()):
        data["result"] = draw(st.one_of(st.text(max_size=50), small_dicts))
    if draw(st.booleans()):
        data["progress"] = draw(st.floats(min_value=0, max_value=100))
    if draw(st.booleans()):
        data["details"] = draw(small_dicts)
    if draw(st.booleans()):
        data["preview"] = draw(small_dicts)
    return data


class TestProperty2SnapshotSerialization:
    """Property 2: Result Snapshot Serialization.

    *For any* raw get_result payload, parsing then serializing keeps every
    populated field and reports omitted optional fields as None.
    """

    @settings(max_examples=100)
    @given(data=raw_result_payload())
    def test_populated_fields_survive(self, data: dict) -> None:
        serialized = GetResultResponse.from_dict(data).to_dict()

        assert set(serialized) == SNAPSHOT_KEYS
        for key, value in data.items():
            assert serialized[key] == value

    @settings(max_examples=100)
    @given(data=raw_result_payload())
    def test_omitted_fields_are_none(self, data: dict) -> None:
        serialized = GetResultResponse.from_dict(data).to_dict()

        for key in SNAPSHOT_KEYS - set(data):
            assert serialized[key] is None


class TestGetResultResponse:
    def test_from_dict_full_payload(self, sample_result_data: dict) -> None:
        result = GetResultResponse.from_dict(sample_result_data)

        assert result.id == "task-123"
        assert result.status is ResultStatus.READY
        assert result.progress == 100.0
        assert isinstance(result.progress, float)
        assert result.details == {"seed": 42}
        assert result.preview is None
        assert result.is_complete()
        assert result.is_successful()
        assert not result.is_failed()
        assert not result.is_in_progress()

    def test_result_accessors(self, sample_result_data: dict) -> None:
        result = GetResultResponse.from_dict(sample_result_data)
        assert result.result_as_dict() == sample_result_data["result"]
        assert result.result_as_str() is None

        url_result = GetResultResponse.from_dict(
            {"id": "t", "status": "Ready", "result": "https://example.com/a.png"}
        )
        assert url_result.result_as_str() == "https://example.com/a.png"
        assert url_result.result_as_dict() is None

    def test_minimal_payload(self) -> None:
        result = GetResultResponse.from_dict({"status": "Pending"})

        assert result.id == ""
        assert result.result is None
        assert result.progress_percentage() is None
        assert result.details is None
        assert result.preview is None
        assert result.is_in_progress()

    @pytest.mark.parametrize(
        "progress,expected",
        [
            (42, 42.0),
            (42.5, 42.5),
            ("75", 75.0),
            ("n/a", None),
            (True, None),
            (None, None),
            ("nan", None),
            ("inf", None),
            (float("nan"), None),
            (float("inf"), None),
        ],
    )
    def test_progress_parsing(self, progress: object, expected: object) -> None:
        result = GetResultResponse.from_dict({"id": "t", "status": "Pending", "progress": progress})
        assert result.progress == expected

    def test_non_dict_details_dropped(self) -> None:
        result = GetResultResponse.from_dict(
            {"id": "t", "status": "Error", "details": ["x"], "preview": "y"}
        )
        assert result.details is None
        assert result.preview is None
        assert result.is_failed()

    @pytest.mark.parametrize("payload", [{}, {"status": "Done"}, {"status": 3}])
    def test_invalid_status_raises(self, payload: dict) -> None:
        with pytest.raises(InvalidStatusError):
            GetResultResponse.from_dict(payload)

    def test_snapshot_is_immutable(self, sample_result_data: dict) -> None:
        result = GetResultResponse.from_dict(sample_result_data)
        with pytest.raises(ValidationError):
            result.status = ResultStatus.ERROR


class TestImageGenerationResponse:
    def test_from_dict(self) -> None:
        response = ImageGenerationResponse.from_dict(
            {"id": "task-1", "polling_url": "https://api.bfl.ai/v1/get_result?id=task-1"}
        )
        assert response.task_id == "task-1"
        assert response.to_dict() == {
            "id": "task-1",
            "polling_url": "https://api.bfl.ai/v1/get_result?id=task-1",
        }

    def test_missing_fields_default_to_empty(self) -> None:
        response = ImageGenerationResponse.from_dict({"id": 7})
        assert response.id == ""
        assert response.polling_url == ""
