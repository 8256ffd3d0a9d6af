"""
Static furniture synonym map, grouped by category hint.
Each canonical term maps to the terms shoppers use for it.
"""

STATIC_SYNONYMS: dict[str, dict[str, list[str]]] = {
    # ── Seating ─────────────────────────────────────────────────────────────
    "seating": {
        "sofa": ["couch", "settee", "loveseat", "divan", "davenport", "sectional"],
        "chair": ["seat", "armchair", "recliner", "lounger"],
        "recliner": ["lazy boy"],
        "stool": ["barstool", "bar stool", "footstool"],
        "bench": ["pew"],
        "ottoman": ["pouf", "hassock"],
        "beanbag": ["bean bag", "floor cushion"],
        "rocker": ["rocking chair", "glider"],
    },
    # ── Tables ──────────────────────────────────────────────────────────────
    "tables": {
        "table": ["surface"],
        "desk": ["workstation", "bureau", "writing desk"],
        "counter": ["countertop", "worktop", "bartop"],
        "nightstand": ["bedside table", "night table", "bedside"],
        "coffee table": ["cocktail table", "center table"],
        "dining table": ["dinner table", "kitchen table"],
        "end table": ["side table", "accent table"],
        "console": ["console table", "hallway table", "entry table"],
        "workbench": ["work table", "craft table", "workshop table"],
    },
    # ── Storage & cabinets ──────────────────────────────────────────────────
    "storage": {
        "cabinet": ["cupboard", "armoire", "storage"],
        "wardrobe": ["closet", "clothes cabinet"],
        "dresser": ["chest of drawers", "drawers"],
        "shelf": ["shelving", "ledge"],
        "bookcase": ["bookshelf", "book rack"],
        "trunk": ["storage box", "footlocker"],
        "safe": ["vault", "strongbox", "lockbox"],
        "sideboard": ["buffet", "credenza", "hutch"],
    },
    # ── Beds & bedroom ──────────────────────────────────────────────────────
    "bedroom": {
        "bed": ["cot", "sleeping"],
        "mattress": ["foam", "sleeping pad"],
        "bunk": ["bunkbed", "bunk bed", "loft bed"],
        "crib": ["baby bed", "cradle"],
        "futon": ["sofa bed", "sleeper"],
        "pillow": ["cushion", "throw pillow"],
        "blanket": ["comforter", "duvet", "quilt"],
    },
    # ── Lighting ────────────────────────────────────────────────────────────
    "lighting": {
        "lamp": ["light", "lantern", "lighting"],
        "chandelier": ["pendant", "hanging light"],
        "sconce": ["wall light", "wall lamp"],
        "spotlight": ["track light", "accent light"],
        "candle": ["candlestick", "taper"],
        "fairy lights": ["string lights", "christmas lights", "twinkle lights"],
    },
    # ── Decor ───────────────────────────────────────────────────────────────
    "decor": {
        "rug": ["carpet", "mat", "runner", "area rug"],
        "curtain": ["drape", "blind", "window treatment"],
        "mirror": ["looking glass", "vanity mirror"],
        "plant": ["greenery", "houseplant"],
        "vase": ["urn", "vessel"],
        "painting": ["picture", "artwork", "canvas"],
        "statue": ["sculpture", "figurine", "bust"],
        "clock": ["timepiece", "wall clock"],
    },
    # ── Kitchen & appliances ────────────────────────────────────────────────
    "kitchen": {
        "fridge": ["refrigerator", "freezer", "icebox"],
        "stove": ["oven", "range", "cooker", "cooktop"],
        "sink": ["basin", "washbasin", "wash basin"],
        "tv": ["television", "telly", "flatscreen"],
        "kettle": ["teapot"],
        "coffee maker": ["coffee machine", "espresso", "brewer"],
    },
    # ── Outdoor & garden ────────────────────────────────────────────────────
    "outdoor": {
        "grill": ["bbq", "barbecue", "smoker"],
        "umbrella": ["parasol", "beach umbrella"],
        "fence": ["railing", "fencing"],
        "hammock": ["porch swing"],
        "planter": ["flower pot", "plant pot"],
        "gazebo": ["pergola", "pavilion", "canopy"],
    },
    # ── Materials & styles ──────────────────────────────────────────────────
    "materials": {
        "wood": ["wooden", "timber", "lumber"],
        "metal": ["steel", "iron", "aluminum", "chrome"],
        "leather": ["faux leather", "pleather", "hide"],
        "fabric": ["textile", "upholstery"],
        "wicker": ["rattan", "bamboo", "cane"],
        "modern": ["contemporary", "minimalist", "sleek"],
        "vintage": ["retro", "antique", "classic"],
        "rustic": ["country", "farmhouse", "cottage"],
    },
    # ── Colors & sizes ──────────────────────────────────────────────────────
    "attributes": {
        "gray": ["grey", "charcoal", "slate"],
        "white": ["cream", "ivory", "off-white"],
        "small": ["sm", "mini", "compact", "tiny"],
        "medium": ["md", "regular", "standard"],
        "large": ["lg", "big", "oversized"],
    },
}
