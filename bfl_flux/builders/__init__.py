"""Request builders for the FLUX client."""

from bfl_flux.builders.image_request import ImageRequestBuilder

__all__ = ["ImageRequestBuilder"]
