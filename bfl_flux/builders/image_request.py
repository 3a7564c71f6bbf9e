"""Builder for image generation requests."""

import math
import random
from typing import Any, Optional

from bfl_flux.models.enums import OutputFormat
from bfl_flux.models.requests import (
    DEFAULT_GUIDANCE,
    DEFAULT_HEIGHT,
    DEFAULT_INTERVAL,
    DEFAULT_SAFETY_TOLERANCE,
    DEFAULT_STEPS,
    DEFAULT_WIDTH,
    Flux1ProRequest,
)
from bfl_flux.utils.errors import InvalidArgumentError

DIMENSION_STEP = 32
MAX_SEED = 2**63 - 1


def _round_to_step(value: float) -> int:
    # Half-up; round() would take 12.5 down to 12
    return int(math.floor(value / DIMENSION_STEP + 0.5)) * DIMENSION_STEP


class ImageRequestBuilder:
    """Mutable builder producing immutable Flux1ProRequest objects."""

    def __init__(self) -> None:
        self.prompt: Optional[str] = None
        self.image_prompt: Optional[str] = None
        self.width = DEFAULT_WIDTH
        self.height = DEFAULT_HEIGHT
        self.steps = DEFAULT_STEPS
        self.prompt_upsampling = False
        self.seed: Optional[int] = None
        self.guidance = DEFAULT_GUIDANCE
        self.interval = DEFAULT_INTERVAL
        self.safety_tolerance = DEFAULT_SAFETY_TOLERANCE
        self.output_format = OutputFormat.JPEG
        self.webhook_url: Optional[str] = None
        self.webhook_secret: Optional[str] = None

    @classmethod
    def create(cls) -> "ImageRequestBuilder":
        return cls()

    def with_prompt(self, prompt: str) -> "ImageRequestBuilder":
        self.prompt = prompt
        return self

    def with_image_prompt(self, image_prompt: str) -> "ImageRequestBuilder":
        """Set an image prompt encoded in base64."""
        self.image_prompt = image_prompt
        return self

    def with_dimensions(self, width: int, height: int) -> "ImageRequestBuilder":
        self.width = width
        self.height = height
        return self

    def with_aspect_ratio(self, ratio: str, base_size: int = 1024) -> "ImageRequestBuilder":
        """
        Derive dimensions from a "W:H" ratio.

        The longer side is set to base_size and the shorter side is rounded
        to the nearest multiple of 32.

        Args:
            ratio: Aspect ratio such as "16:9"
            base_size: Length of the longer side in pixels

        Raises:
            InvalidArgumentError: If ratio is not two positive integers
        """
        parts = ratio.split(":")
        try:
            width_ratio, height_ratio = (int(part) for part in parts)
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid aspect ratio: {ratio!r}") from e
        if width_ratio <= 0 or height_ratio <= 0:
            raise InvalidArgumentError(f"Invalid aspect ratio: {ratio!r}")

        if width_ratio >= height_ratio:
            self.width = base_size
            self.height = _round_to_step(base_size * height_ratio / width_ratio)
        else:
            self.height = base_size
            self.width = _round_to_step(base_size * width_ratio / height_ratio)
        return self

    def with_steps(self, steps: int) -> "ImageRequestBuilder":
        self.steps = steps
        return self

    def with_prompt_upsampling(self, enabled: bool = True) -> "ImageRequestBuilder":
        self.prompt_upsampling = enabled
        return self

    def with_seed(self, seed: int) -> "ImageRequestBuilder":
        self.seed = seed
        return self

    def with_random_seed(self) -> "ImageRequestBuilder":
        self.seed = random.randint(0, MAX_SEED)
        return self

    def with_guidance(self, guidance: float) -> "ImageRequestBuilder":
        self.guidance = guidance
        return self

    def with_interval(self, interval: float) -> "ImageRequestBuilder":
        self.interval = interval
        return self

    def with_safety_tolerance(self, tolerance: int) -> "ImageRequestBuilder":
        """Set moderation tolerance (0 = strict, 6 = lenient)."""
        self.safety_tolerance = tolerance
        return self

    def with_output_format(self, output_format: OutputFormat) -> "ImageRequestBuilder":
        self.output_format = output_format
        return self

    def as_jpeg(self) -> "ImageRequestBuilder":
        return self.with_output_format(OutputFormat.JPEG)

    def as_png(self) -> "ImageRequestBuilder":
        return self.with_output_format(OutputFormat.PNG)

    def with_webhook(self, url: str, secret: Optional[str] = None) -> "ImageRequestBuilder":
        self.webhook_url = url
        self.webhook_secret = secret
        return self

    def build_flux1_pro(self) -> Flux1ProRequest:
        return Flux1ProRequest(
            prompt=self.prompt,
            image_prompt=self.image_prompt,
            width=self.width,
            height=self.height,
            steps=self.steps,
            prompt_upsampling=self.prompt_upsampling,
            seed=self.seed,
            guidance=self.guidance,
            interval=self.interval,
            safety_tolerance=self.safety_tolerance,
            output_format=self.output_format,
            webhook_url=self.webhook_url,
            webhook_secret=self.webhook_secret,
        )

    def build_dict(self) -> dict[str, Any]:
        """Build a request body for endpoints that take plain parameters."""
        return self.build_flux1_pro().to_dict()
