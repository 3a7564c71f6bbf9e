"""Request models for FLUX image generation."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from bfl_flux.models.enums import OutputFormat
from bfl_flux.models.parsing import float_or_default, int_or_default, str_or_none
from bfl_flux.utils.errors import InvalidArgumentError

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
DEFAULT_STEPS = 40
DEFAULT_GUIDANCE = 2.5
DEFAULT_INTERVAL = 2.0
DEFAULT_SAFETY_TOLERANCE = 2

# Fields only sent when set
OPTIONAL_FIELDS = ("prompt", "image_prompt", "seed", "webhook_url", "webhook_secret")


class Flux1ProRequest(BaseModel):
    """Parameters for a FLUX1 Pro generation."""

    model_config = ConfigDict(frozen=True)

    prompt: Optional[str] = None
    image_prompt: Optional[str] = None
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    steps: int = DEFAULT_STEPS
    prompt_upsampling: bool = False
    seed: Optional[int] = None
    guidance: float = DEFAULT_GUIDANCE
    interval: float = DEFAULT_INTERVAL
    safety_tolerance: int = DEFAULT_SAFETY_TOLERANCE
    output_format: OutputFormat = OutputFormat.JPEG
    webhook_url: Optional[str] = None
    webhook_secret: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Flux1ProRequest":
        """Build a request from an API-shaped dict, falling back to defaults."""
        raw_format = data.get("output_format")
        if isinstance(raw_format, str):
            try:
                output_format = OutputFormat(raw_format)
            except ValueError as e:
                raise InvalidArgumentError(f"Unsupported output format: {raw_format}") from e
        else:
            output_format = OutputFormat.JPEG

        return cls(
            prompt=str_or_none(data, "prompt"),
            image_prompt=str_or_none(data, "image_prompt"),
            width=int_or_default(data, "width", DEFAULT_WIDTH),
            height=int_or_default(data, "height", DEFAULT_HEIGHT),
            steps=int_or_default(data, "steps", DEFAULT_STEPS),
            prompt_upsampling=bool(data.get("prompt_upsampling", False)),
            seed=int_or_default(data, "seed", None),
            guidance=float_or_default(data, "guidance", DEFAULT_GUIDANCE),
            interval=float_or_default(data, "interval", DEFAULT_INTERVAL),
            safety_tolerance=int_or_default(data, "safety_tolerance", DEFAULT_SAFETY_TOLERANCE),
            output_format=output_format,
            webhook_url=str_or_none(data, "webhook_url"),
            webhook_secret=str_or_none(data, "webhook_secret"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON body expected by the API."""
        data: dict[str, Any] = {
            "width": self.width,
            "height": self.height,
            "steps": self.steps,
            "prompt_upsampling": self.prompt_upsampling,
            "guidance": self.guidance,
            "interval": self.interval,
            "safety_tolerance": self.safety_tolerance,
            "output_format": self.output_format.value,
        }
        for field in OPTIONAL_FIELDS:
            value = getattr(self, field)
            if value is not None:
                data[field] = value
        return data

    def validation_errors(self) -> list[str]:
        """
        Check parameter ranges accepted by the API.

        Returns:
            List of human-readable problems (empty when the request is valid)
        """
        errors: list[str] = []

        if self.width < 32 or self.width % 32 != 0:
            errors.append("Width must be a multiple of 32 and at least 32 pixels")

        if self.height < 32 or self.height % 32 != 0:
            errors.append("Height must be a multiple of 32 and at least 32 pixels")

        if not 1 <= self.steps <= 100:
            errors.append("Steps must be between 1 and 100")

        if not 1.5 <= self.guidance <= 5.0:
            errors.append("Guidance must be between 1.5 and 5.0")

        if not 1.0 <= self.interval <= 4.0:
            errors.append("Interval must be between 1.0 and 4.0")

        if not 0 <= self.safety_tolerance <= 6:
            errors.append("Safety tolerance must be between 0 and 6")

        if self.prompt is None and self.image_prompt is None:
            errors.append("Either prompt or image_prompt must be provided")

        return errors
