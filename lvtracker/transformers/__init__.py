"""Wire models for service and CLI output."""

from .availability_transformer import (
    AvailabilityTransformer,
    ProductAvailability,
    ProductLinks,
)

__all__ = ["AvailabilityTransformer", "ProductAvailability", "ProductLinks"]
