# Brand palette, grouped for display. Color names double as page anchors and
# CSS custom property suffixes (brand-<name>), so they must be unique.
BRAND_PALETTE = {
    "primary": {
        "ink": "#1b1f3b",
        "navy": "#23305e",
        "cobalt": "#2f4fb5",
        "sky": "#5b9bf0",
        "ice": "#d6e6fc",
    },
    "secondary": {
        "plum": "#4b1d52",
        "grape": "#7a3b8f",
        "lilac": "#b79ad6",
        "lavender": "#e9def5",
    },
    "warm": {
        "cherry": "#c8102e",
        "coral": "#f0624d",
        "peach": "#f9b199",
        "tangerine": "#f58a1f",
        "marigold": "#ffc233",
        "butter": "#fff1b8",
    },
    "cool": {
        "forest": "#1e5631",
        "jade": "#2e9e6b",
        "mint": "#a7e3c6",
        "teal": "#14737a",
        "aqua": "#7fd8dc",
    },
    "neutrals": {
        "black": "#000000",
        "charcoal": "#333333",
        "slate": "#5f6b7a",
        "stone": "#9aa3ad",
        "mist": "#dfe3e8",
        "cloud": "#f4f6f8",
        "white": "#ffffff",
    },
}
