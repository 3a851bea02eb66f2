"""Prompt templates per generation task. Placeholders are filled by llm.narrative."""

from __future__ import annotations

_DESCRIPTION_TEMPLATE = """Write a compelling, SEO-optimized product description for "{product_name}" crafted by {artisan_name}.

Category: {category}
Materials: {materials}
Time spent: {time_spent}
Location: {location}

CULTURAL CONTEXT: {significance}
TRENDING KEYWORDS to incorporate: {trending_keywords}
TARGET AUDIENCE: {target_demographics}

Focus on:
1. Cultural heritage and traditional techniques
2. Sustainability and eco-friendliness
3. Unique artisan story
4. Quality and authenticity
5. Modern relevance and style

Make it compelling for both traditional craft lovers and modern consumers."""

_STORY_TEMPLATE = """Tell an inspiring, authentic story about {artisan_name}, the master craftsperson behind "{product_name}".

Artisan Details:
- Experience: {experience}
- Location: {location}
- Craft: {category}

CULTURAL HERITAGE TO WEAVE IN:
- Regional significance: {regions}
- Traditional techniques: {traditions}
- Cultural importance: {significance}

Create a narrative that:
1. Connects the artisan's personal journey with cultural heritage
2. Explains how traditional techniques are preserved and adapted
3. Shows the bridge between ancient craftsmanship and modern relevance
4. Highlights the sustainability and authenticity of handmade crafts
5. Makes readers appreciate both the artisan and the cultural tradition

Make it emotionally engaging and culturally rich."""

_PRICING_TEMPLATE = """Provide competitive pricing analysis and suggestions for "{product_name}" by {artisan_name}.

Product Details:
- Category: {category}
- Materials: {materials}
- Time invested: {time_spent}
- Artisan experience: {experience}
- Location: {location}

MARKET CONTEXT:
- Typical price range: {price_range}
- Target buyers: {target_demographics}
- Seasonal demand: {seasonal_demand}

Provide:
1. Suggested retail price with justification
2. Cost breakdown (materials, labor, overhead, profit)
3. Competitive positioning strategy
4. Pricing for different market segments (local, national, international)
5. Seasonal pricing recommendations
6. Value proposition that justifies the price

Consider fair compensation for artisan labor, material costs, cultural value, and market positioning."""

_PRICING_FROM_IMAGE_TEMPLATE = """You are providing pricing for a REAL craft item that has been analyzed. Use this CONFIRMED analysis data:

VISUAL ANALYSIS COMPLETED:
- Confirmed Category: {category}
- Complexity Level: {complexity}
- Estimated Size: {size}
- Materials Identified: {materials}
- Key Visual Features: {key_features}
- Analysis Confidence: {confidence}%

PRODUCT DETAILS:
- Item Name: {product_name}
- Artisan: {artisan_name}
- Location: {location}
- Experience: {experience}

MARKET CONTEXT:
- Category Price Range: {price_range}
- Base Price Band: {base_price_band}
- Target Market: {target_demographics}

CULTURAL SIGNIFICANCE:
{significance}

Based on this CONFIRMED visual analysis, provide specific pricing recommendations:

1. **Exact Price Recommendation**: Based on {complexity} complexity and {size} size
2. **Visual Quality Assessment**: What the analysis reveals about craftsmanship quality
3. **Material Value**: Pricing impact of identified materials: {materials}
4. **Complexity Premium**: How {complexity} complexity affects pricing
5. **Market Positioning**: Specific positioning in {category} market

Provide concrete numbers and specific recommendations based on the confirmed analysis data."""

_INSIGHTS_TEMPLATE = """Provide comprehensive market insights for "{product_name}" in the {category} category.

CURRENT MARKET LANDSCAPE:
- Trending keywords: {trending_keywords}
- Target demographics: {target_demographics}
- Seasonal patterns: {seasonal_demand}

CULTURAL POSITIONING:
- Heritage regions: {regions}
- Cultural significance: {significance}

Analyze:
1. Market opportunities for traditional crafts in digital marketplace
2. Consumer behavior trends favoring handmade/sustainable products
3. Challenges faced by traditional artisans in modern markets
4. Strategies to bridge traditional craftsmanship with contemporary preferences
5. Digital marketing opportunities and platforms
6. Export potential and international market interest
7. Collaboration opportunities with modern designers/brands
8. Sustainability trends favoring traditional crafts

Provide actionable recommendations for expanding market reach while preserving cultural authenticity."""

_SOCIAL_TEMPLATE = """Create an engaging {platform} post for "{product_name}" by {artisan_name}.

Product: {category} craft
Cultural heritage: {significance}
Trending themes: {trending_keywords}

Platform requirements: {platform_spec}

Include:
1. Compelling hook that bridges tradition with modernity
2. Cultural storytelling element
3. Sustainability/authenticity angle
4. Relevant hashtags including trending keywords
5. Call-to-action that encourages engagement
6. Cultural pride and heritage appreciation

Make it authentic, engaging, and culturally respectful while appealing to modern digital audiences."""

PLATFORM_SPECS = {
    "instagram": "Visual-first, use hashtags, engaging captions, story-worthy",
    "facebook": "Community-focused, longer descriptions, shareable content",
    "twitter": "Concise, trending hashtags, conversation starters",
}

_TEMPLATES = {
    "description": _DESCRIPTION_TEMPLATE,
    "story": _STORY_TEMPLATE,
    "pricing": _PRICING_TEMPLATE,
    "pricing_from_image": _PRICING_FROM_IMAGE_TEMPLATE,
    "insights": _INSIGHTS_TEMPLATE,
    "social": _SOCIAL_TEMPLATE,
}


def get_prompt_template(task: str) -> str:
    return _TEMPLATES[task]


def get_all_templates() -> dict[str, str]:
    """Return all prompt templates keyed by task name."""
    return dict(_TEMPLATES)
