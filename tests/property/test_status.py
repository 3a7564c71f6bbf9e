"""Property-based tests for task status classification.

Property 1: Status Classification Consistency
"""

import pytest
from hypothesis import given, settings, strategies as st

from bfl_flux.models.enums import FinetuneMode, OutputFormat, ResultStatus, classify
from bfl_flux.utils.errors import InvalidStatusError

all_statuses = st.sampled_from(list(ResultStatus))
known_values = {status.value for status in ResultStatus}
unknown_values = st.text(max_size=30).filter(lambda x: x not in known_values)


class TestProperty1StatusClassification:
    """Property 1: Status Classification Consistency.

    *For any* ResultStatus, exactly one of in-progress/complete holds,
    success and failure both imply completion and never hold together,
    and only Ready is successful.
    """

    @settings(max_examples=50)
    @given(status=all_statuses)
    def test_exactly_one_of_in_progress_or_complete(self, status: ResultStatus) -> None:
        assert status.is_in_progress() != status.is_complete()

    @settings(max_examples=50)
    @given(status=all_statuses)
    def test_success_and_failure_imply_complete(self, status: ResultStatus) -> None:
        if status.is_successful():
            assert status.is_complete()
        if status.is_failed():
            assert status.is_complete()
        assert not (status.is_successful() and status.is_failed())

    @settings(max_examples=50)
    @given(status=all_statuses)
    def test_only_ready_is_successful(self, status: ResultStatus) -> None:
        assert status.is_successful() == (status is ResultStatus.READY)

    @settings(max_examples=50)
    @given(status=all_statuses)
    def test_methods_match_lookup_table(self, status: ResultStatus) -> None:
        traits = classify(status)
        assert traits.in_progress == status.is_in_progress()
        assert traits.complete == status.is_complete()
        assert traits.successful == status.is_successful()
        assert traits.failed == status.is_failed()

    @pytest.mark.parametrize(
        "status,complete,failed",
        [
            (ResultStatus.TASK_NOT_FOUND, True, True),
            (ResultStatus.PENDING, False, False),
            (ResultStatus.REQUEST_MODERATED, False, False),
            (ResultStatus.CONTENT_MODERATED, True, True),
            (ResultStatus.READY, True, False),
            (ResultStatus.ERROR, True, True),
        ],
    )
    def test_status_table(self, status: ResultStatus, complete: bool, failed: bool) -> None:
        assert status.is_complete() is complete
        assert status.is_failed() is failed


class TestStatusParsing:
    """Parsing raw status strings from the API."""

    @settings(max_examples=50)
    @given(status=all_statuses)
    def test_parse_known_values(self, status: ResultStatus) -> None:
        assert ResultStatus.parse(status.value) is status

    @settings(max_examples=100)
    @given(value=unknown_values)
    def test_parse_unknown_values_raises(self, value: str) -> None:
        with pytest.raises(InvalidStatusError) as exc_info:
            ResultStatus.parse(value)
        assert exc_info.value.status == value

    @pytest.mark.parametrize("value", [None, 42, ["Ready"], "ready", "READY"])
    def test_parse_rejects_non_matching(self, value: object) -> None:
        with pytest.raises(InvalidStatusError):
            ResultStatus.parse(value)


class TestOtherEnums:
    def test_output_format_mime_and_extension(self) -> None:
        assert OutputFormat.JPEG.mime_type == "image/jpeg"
        assert OutputFormat.JPEG.extension == ".jpg"
        assert OutputFormat.PNG.mime_type == "image/png"
        assert OutputFormat.PNG.extension == ".png"

    def test_finetune_modes(self) -> None:
        assert [mode.value for mode in FinetuneMode] == ["general", "character", "style", "product"]
        assert FinetuneMode.STYLE.description == "Optimized for artistic style transfer"
        for mode in FinetuneMode:
            assert mode.description
