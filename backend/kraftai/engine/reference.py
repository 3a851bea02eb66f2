"""Static reference data — keyword taxonomy, cultural heritage and market trends.

Everything here is immutable and built once per process by ``load_reference_data``.
The ``ReferenceData`` bundle is passed explicitly into the pipeline; stages never
reach for module globals.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from kraftai.models.analysis import CulturalHeritage, MarketTrends


@dataclass(frozen=True)
class CategoryProfile:
    detection_keywords: tuple[str, ...]
    material_keywords: tuple[str, ...]
    price_range: tuple[int, int]  # INR (min, max)


# First-match priority: the classifier walks this tuple front to back and the
# first category with a keyword hit wins. Reordering changes classifications
# ("bowl" is both Pottery and Metal Work, "silver" both Jewelry and Metal Work).
CATEGORY_PRIORITY: tuple[tuple[str, CategoryProfile], ...] = (
    (
        "Textiles",
        CategoryProfile(
            detection_keywords=(
                "fabric", "textile", "cloth", "weaving", "embroidery", "silk",
                "cotton", "saree", "dupatta", "clothing", "dress",
            ),
            material_keywords=("silk", "cotton", "wool", "linen", "fabric"),
            price_range=(2000, 50000),
        ),
    ),
    (
        "Pottery",
        CategoryProfile(
            detection_keywords=(
                "pottery", "ceramic", "clay", "pot", "vessel", "earthenware",
                "vase", "bowl", "mug", "plate",
            ),
            material_keywords=("clay", "ceramic", "terracotta", "earthenware"),
            price_range=(500, 15000),
        ),
    ),
    (
        "Jewelry",
        CategoryProfile(
            detection_keywords=(
                "jewelry", "necklace", "bracelet", "earrings", "ornament",
                "accessory", "gold", "silver", "pendant", "ring",
            ),
            material_keywords=("gold", "silver", "brass", "copper", "beads", "metal"),
            price_range=(1500, 100000),
        ),
    ),
    (
        "Wood Carving",
        CategoryProfile(
            detection_keywords=(
                "wood", "carving", "sculpture", "wooden", "timber", "furniture",
                "table", "chair", "frame",
            ),
            material_keywords=("teak", "rosewood", "sandalwood", "pine", "wood"),
            price_range=(1000, 25000),
        ),
    ),
    (
        "Metal Work",
        CategoryProfile(
            detection_keywords=(
                "metal", "brass", "bronze", "silver", "copper", "metalwork",
                "utensil", "bowl", "plate", "lamp",
            ),
            material_keywords=("brass", "bronze", "copper", "silver", "iron", "metal"),
            price_range=(800, 20000),
        ),
    ),
)


_CULTURAL_HERITAGE: dict[str, CulturalHeritage] = {
    "Textiles": CulturalHeritage(
        regions=("Varanasi", "Kanchipuram", "Pochampally", "Chanderi", "Maheshwar"),
        traditions=(
            "Hand-weaving passed down through generations",
            "Natural dyeing techniques",
            "Intricate brocade work",
        ),
        significance=(
            "Textiles represent India's rich weaving traditions, with each region having "
            "unique patterns and techniques perfected over centuries."
        ),
    ),
    "Pottery": CulturalHeritage(
        regions=("Khurja", "Jaipur", "Kumartuli", "Nizamabad"),
        traditions=("Potter's wheel mastery", "Traditional kiln firing", "Natural clay preparation"),
        significance=(
            "Pottery is one of India's oldest crafts, representing the earth element and "
            "sustainable living practices."
        ),
    ),
    "Jewelry": CulturalHeritage(
        regions=("Jaipur", "Kolkata", "Chennai", "Mumbai"),
        traditions=("Kundan work", "Meenakari", "Temple jewelry", "Tribal silver work"),
        significance=(
            "Indian jewelry craftsmanship reflects spiritual beliefs, royal heritage, and "
            "regional artistic expressions."
        ),
    ),
    "Wood Carving": CulturalHeritage(
        regions=("Saharanpur", "Channapatna", "Kerala", "Rajasthan"),
        traditions=("Intricate relief carving", "Inlay work", "Painted wooden toys"),
        significance=(
            "Wood carving represents harmony with nature and showcases India's architectural "
            "and artistic legacy."
        ),
    ),
    "Metal Work": CulturalHeritage(
        regions=("Moradabad", "Jaipur", "Tamil Nadu", "Kerala"),
        traditions=("Brass work", "Bell metal crafting", "Bronze casting", "Bidriware"),
        significance=(
            "Metal craft demonstrates India's ancient metallurgy knowledge and artistic excellence."
        ),
    ),
}

# Simulated market intelligence; the shape matches what a live feed would return.
_MARKET_TRENDS: dict[str, MarketTrends] = {
    "Textiles": MarketTrends(
        trending_keywords=(
            "sustainable fashion", "handloom", "eco-friendly", "artisan made", "slow fashion",
        ),
        seasonal_demand="High during festival seasons and wedding months",
        target_demographics=("Conscious consumers", "Fashion enthusiasts", "Cultural preservationists"),
        price_range="₹2000-₹50000 depending on complexity and materials",
    ),
    "Pottery": MarketTrends(
        trending_keywords=("handmade ceramics", "artisan pottery", "home decor", "sustainable living"),
        seasonal_demand="Peak during home renovation seasons and festivals",
        target_demographics=("Home decorators", "Art collectors", "Eco-conscious buyers"),
        price_range="₹500-₹15000 based on size and artistic complexity",
    ),
    "Jewelry": MarketTrends(
        trending_keywords=("traditional jewelry", "handcrafted", "ethnic wear", "statement pieces"),
        seasonal_demand="High during wedding season and festivals",
        target_demographics=("Brides", "Fashion enthusiasts", "Cultural jewelry lovers"),
        price_range="₹1500-₹100000 depending on materials and craftsmanship",
    ),
    "Wood Carving": MarketTrends(
        trending_keywords=(
            "handmade woodwork", "artisan furniture", "decorative items", "sustainable wood",
        ),
        seasonal_demand="Steady with peaks during home decoration seasons",
        target_demographics=("Home decorators", "Art collectors", "Eco-conscious buyers"),
        price_range="₹1000-₹25000 based on size and complexity",
    ),
    "Metal Work": MarketTrends(
        trending_keywords=(
            "handcrafted metal", "traditional utensils", "decorative items", "artisan metalwork",
        ),
        seasonal_demand="High during festivals and wedding seasons",
        target_demographics=("Traditional households", "Art collectors", "Gift buyers"),
        price_range="₹800-₹20000 depending on materials and craftsmanship",
    ),
}


@dataclass(frozen=True)
class ReferenceData:
    """Read-only bundle shared by every request."""

    taxonomy: tuple[tuple[str, CategoryProfile], ...]
    cultural: Mapping[str, CulturalHeritage]
    market: Mapping[str, MarketTrends]

    @property
    def categories(self) -> list[str]:
        return [name for name, _ in self.taxonomy]

    def profile(self, category: str) -> CategoryProfile | None:
        for name, profile in self.taxonomy:
            if name == category:
                return profile
        return None

    def heritage(self, category: str) -> CulturalHeritage:
        return self.cultural.get(category) or CulturalHeritage()

    def trends(self, category: str) -> MarketTrends:
        return self.market.get(category) or MarketTrends()


def build_reference_data(
    taxonomy: tuple[tuple[str, CategoryProfile], ...] = CATEGORY_PRIORITY,
    cultural: Mapping[str, CulturalHeritage] | None = None,
    market: Mapping[str, MarketTrends] | None = None,
) -> ReferenceData:
    return ReferenceData(
        taxonomy=tuple(taxonomy),
        cultural=MappingProxyType(dict(_CULTURAL_HERITAGE if cultural is None else cultural)),
        market=MappingProxyType(dict(_MARKET_TRENDS if market is None else market)),
    )


@lru_cache(maxsize=1)
def load_reference_data() -> ReferenceData:
    """Process-wide reference data, built on first use."""
    return build_reference_data()
