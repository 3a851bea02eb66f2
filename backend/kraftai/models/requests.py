"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProductDetails(BaseModel):
    """Product and artisan metadata sent by the storefront form."""

    model_config = ConfigDict(populate_by_name=True)

    product_name: str = Field("", alias="productName", description="Name of the product")
    artisan_name: str = Field("", alias="artisanName", description="Name of the artisan")
    category: str = Field("", description="Craft category, e.g. Pottery")
    materials: str | None = Field(None, description="Free-text materials list")
    time_spent: str | None = Field(None, alias="timeSpent", description="Time invested in the piece")
    location: str | None = Field(None, description="Where the artisan works")
    experience: str | None = Field(None, description="Artisan experience")


class SocialContentRequest(ProductDetails):
    platform: str = Field("general", description="instagram, facebook, twitter or general")
