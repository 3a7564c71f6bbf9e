"""Response models returned by the FLUX API."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from bfl_flux.models.enums import ResultStatus
from bfl_flux.models.parsing import dict_or_none, float_or_default, str_or_none


class ImageGenerationResponse(BaseModel):
    """Acknowledgement for a submitted generation task."""

    model_config = ConfigDict(frozen=True)

    id: str
    polling_url: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImageGenerationResponse":
        return cls(
            id=str_or_none(data, "id") or "",
            polling_url=str_or_none(data, "polling_url") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "polling_url": self.polling_url}

    @property
    def task_id(self) -> str:
        """Task ID to pass to the get_result endpoint."""
        return self.id


class GetResultResponse(BaseModel):
    """Snapshot of a task's status and result from one get_result call."""

    model_config = ConfigDict(frozen=True)

    id: str
    status: ResultStatus
    result: Any = None
    progress: Optional[float] = None
    details: Optional[dict[str, Any]] = None
    preview: Optional[dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GetResultResponse":
        """
        Build a snapshot from a raw get_result payload.

        Args:
            data: Decoded JSON body

        Returns:
            GetResultResponse with omitted fields set to None

        Raises:
            InvalidStatusError: If status is missing or not a known value
        """
        return cls(
            id=str_or_none(data, "id") or "",
            status=ResultStatus.parse(data.get("status")),
            result=data.get("result"),
            progress=float_or_default(data, "progress", None),
            details=dict_or_none(data, "details"),
            preview=dict_or_none(data, "preview"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status.value,
            "result": self.result,
            "progress": self.progress,
            "details": self.details,
            "preview": self.preview,
        }

    def is_complete(self) -> bool:
        return self.status.is_complete()

    def is_failed(self) -> bool:
        return self.status.is_failed()

    def is_successful(self) -> bool:
        return self.status.is_successful()

    def is_in_progress(self) -> bool:
        return self.status.is_in_progress()

    def result_as_dict(self) -> Optional[dict[str, Any]]:
        """Result payload if it is a mapping, otherwise None."""
        return self.result if isinstance(self.result, dict) else None

    def result_as_str(self) -> Optional[str]:
        """Result payload if it is a string (usually an image URL), otherwise None."""
        return self.result if isinstance(self.result, str) else None

    def progress_percentage(self) -> Optional[float]:
        return self.progress
