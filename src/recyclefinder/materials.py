"""Mapping between OSM recycling tags and human-readable material names."""

ANY_MATERIAL = "any"

# Human-facing category -> OSM ``recycling:<tag>`` suffix
MATERIAL_TAGS = {
    "Plastic": "plastic",
    "Paper": "paper",
    "Glass": "glass",
    "Cardboard": "cardboard",
    "Metal": "scrap_metal",
    "Organic": "organic",
    "Battery": "batteries",
    "Electronics": "electronic",
    "Textile": "clothes",
    "Wood": "wood",
}


def categories() -> list[str]:
    """Return the known material categories in display order."""
    return list(MATERIAL_TAGS)


def format_material_name(tag: str) -> str:
    """Turn an OSM tag suffix into a display name, e.g. 'scrap_metal' -> 'Scrap Metal'."""
    return " ".join(word[:1].upper() + word[1:] for word in tag.split("_"))


def normalize_material_type(category: str) -> str:
    """
    Map a material category to its OSM tag.

    The lookup is case-sensitive on the category label; anything not in
    the table falls back to its lower-cased form.
    """
    return MATERIAL_TAGS.get(category, category.lower())
