"""Enumerations used by the FLUX API."""

from enum import Enum
from typing import NamedTuple

from bfl_flux.utils.errors import InvalidStatusError


class ResultStatus(str, Enum):
    """Status of a generation task as reported by the get_result endpoint."""

    TASK_NOT_FOUND = "Task not found"
    PENDING = "Pending"
    REQUEST_MODERATED = "Request Moderated"
    CONTENT_MODERATED = "Content Moderated"
    READY = "Ready"
    ERROR = "Error"

    @classmethod
    def parse(cls, value: object) -> "ResultStatus":
        """Parse a raw status string, raising InvalidStatusError if unknown."""
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise InvalidStatusError(value)

    def is_in_progress(self) -> bool:
        """Check if the task is still in progress."""
        return _STATUS_TRAITS[self].in_progress

    def is_complete(self) -> bool:
        """Check if the task reached a terminal status."""
        return _STATUS_TRAITS[self].complete

    def is_successful(self) -> bool:
        """Check if the task finished successfully."""
        return _STATUS_TRAITS[self].successful

    def is_failed(self) -> bool:
        """Check if the task finished unsuccessfully."""
        return _STATUS_TRAITS[self].failed


class StatusTraits(NamedTuple):
    in_progress: bool
    complete: bool
    successful: bool
    failed: bool


_IN_PROGRESS = StatusTraits(in_progress=True, complete=False, successful=False, failed=False)
_SUCCEEDED = StatusTraits(in_progress=False, complete=True, successful=True, failed=False)
_FAILED = StatusTraits(in_progress=False, complete=True, successful=False, failed=True)

_STATUS_TRAITS = {
    ResultStatus.TASK_NOT_FOUND: _FAILED,
    ResultStatus.PENDING: _IN_PROGRESS,
    ResultStatus.REQUEST_MODERATED: _IN_PROGRESS,
    ResultStatus.CONTENT_MODERATED: _FAILED,
    ResultStatus.READY: _SUCCEEDED,
    ResultStatus.ERROR: _FAILED,
}


def classify(status: ResultStatus) -> StatusTraits:
    """Return the classification flags for a status."""
    return _STATUS_TRAITS[status]


class OutputFormat(str, Enum):
    """Image format of the generated output."""

    JPEG = "jpeg"
    PNG = "png"

    @property
    def mime_type(self) -> str:
        return f"image/{self.value}"

    @property
    def extension(self) -> str:
        return ".jpg" if self is OutputFormat.JPEG else ".png"


_FINETUNE_DESCRIPTIONS = {
    "general": "General purpose fine-tuning for diverse content",
    "character": "Optimized for character-based training",
    "style": "Optimized for artistic style transfer",
    "product": "Optimized for product photography and commercial use",
}


class FinetuneMode(str, Enum):
    """Training mode for fine-tunes."""

    GENERAL = "general"
    CHARACTER = "character"
    STYLE = "style"
    PRODUCT = "product"

    @property
    def description(self) -> str:
        """What this mode is optimized for."""
        return _FINETUNE_DESCRIPTIONS[self.value]
