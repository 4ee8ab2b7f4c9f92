"""
Wire models for availability results.

Field names on the wire are capitalised (``{"Sku": ..., "Available": ...}``),
which is what existing clients of the service read.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductAvailability(BaseModel):
    """Online availability of one SKU. Derived per request, never stored."""

    model_config = ConfigDict(populate_by_name=True)

    sku: str = Field(alias="Sku")
    available: bool = Field(default=False, alias="Available")

    @field_validator("sku", mode="before")
    @classmethod
    def coerce_sku(cls, v) -> str:
        # Upstream identifiers occasionally arrive as numbers
        return v if isinstance(v, str) else str(v)


class ProductLinks(BaseModel):
    """Product page URL and API self-link for one SKU."""

    model_config = ConfigDict(populate_by_name=True)

    sku: str = Field(alias="Sku")
    url: str = Field(default="", alias="Url")
    endpoint: str = Field(default="", alias="Endpoint")


class AvailabilityTransformer:
    """Converts availability models to and from their wire payloads."""

    def to_payload(
        self, result: Union[BaseModel, list[BaseModel]]
    ) -> Union[dict, list[dict]]:
        if isinstance(result, list):
            return [item.model_dump(by_alias=True) for item in result]
        return result.model_dump(by_alias=True)

    def from_payload(self, payload: dict) -> ProductAvailability:
        return ProductAvailability.model_validate(payload)

    def from_payload_batch(self, payloads: list) -> list[ProductAvailability]:
        return [self.from_payload(p) for p in payloads or []]
