"""Built-in French -> English glossary for furniture catalog queries."""

from __future__ import annotations

# Common French words that mark a query as French
FRENCH_MARKERS: frozenset[str] = frozenset({
    "le", "la", "les", "un", "une", "des", "du", "de", "et", "ou", "avec",
    "pour", "dans", "sur", "sous", "entre", "blanc", "noir", "rouge", "bleu",
    "vert", "jaune", "grande", "petit", "petite", "moderne", "ancien", "ancienne",
    "bois", "métal", "verre", "cuir", "tissu", "chaise", "table", "lit",
    "canapé", "armoire", "lampe", "bureau", "fauteuil", "étagère", "meuble",
})

# French diacritics used as a language signal
FRENCH_DIACRITICS = "éèêëàâäùûüôöîïç"

FR_TO_EN: dict[str, str] = {
    # Furniture
    "chaise": "chair",
    "chaises": "chairs",
    "table": "table",
    "tables": "tables",
    "lit": "bed",
    "lits": "beds",
    "canapé": "sofa",
    "sofa": "sofa",
    "fauteuil": "armchair",
    "fauteuils": "armchairs",
    "bureau": "desk",
    "bureaux": "desks",
    "armoire": "wardrobe",
    "armoires": "wardrobes",
    "commode": "dresser",
    "commodes": "dressers",
    "étagère": "shelf",
    "étagères": "shelves",
    "lampe": "lamp",
    "lampes": "lamps",
    "lustre": "chandelier",
    "lustres": "chandeliers",
    "miroir": "mirror",
    "miroirs": "mirrors",
    "tapis": "rug",
    "rideau": "curtain",
    "rideaux": "curtains",
    "coussin": "pillow",
    "coussins": "pillows",
    "couverture": "blanket",
    "matelas": "mattress",
    "oreiller": "pillow",
    "tabouret": "stool",
    "tabourets": "stools",
    "banc": "bench",
    "bancs": "benches",
    "buffet": "sideboard",
    "vitrine": "display case",
    "bibliothèque": "bookshelf",
    "placard": "cupboard",
    "placards": "cupboards",
    "tiroir": "drawer",
    "tiroirs": "drawers",
    "meuble": "furniture",
    "meubles": "furniture",
    # Materials
    "bois": "wood",
    "métal": "metal",
    "verre": "glass",
    "cuir": "leather",
    "tissu": "fabric",
    "plastique": "plastic",
    "marbre": "marble",
    "pierre": "stone",
    "céramique": "ceramic",
    "acier": "steel",
    "fer": "iron",
    "laiton": "brass",
    "chrome": "chrome",
    "rotin": "rattan",
    "osier": "wicker",
    "bambou": "bamboo",
    # Colors
    "blanc": "white",
    "blanche": "white",
    "noir": "black",
    "noire": "black",
    "rouge": "red",
    "bleu": "blue",
    "bleue": "blue",
    "vert": "green",
    "verte": "green",
    "jaune": "yellow",
    "orange": "orange",
    "rose": "pink",
    "violet": "purple",
    "violette": "purple",
    "gris": "gray",
    "grise": "gray",
    "brun": "brown",
    "brune": "brown",
    "marron": "brown",
    "beige": "beige",
    "crème": "cream",
    "doré": "gold",
    "argenté": "silver",
    # Styles
    "moderne": "modern",
    "classique": "classic",
    "vintage": "vintage",
    "rustique": "rustic",
    "industriel": "industrial",
    "industrielle": "industrial",
    "minimaliste": "minimalist",
    "contemporain": "contemporary",
    "contemporaine": "contemporary",
    "ancien": "antique",
    "ancienne": "antique",
    "luxueux": "luxurious",
    "luxueuse": "luxurious",
    # Rooms
    "salon": "living room",
    "chambre": "bedroom",
    "cuisine": "kitchen",
    "salle de bain": "bathroom",
    "salle à manger": "dining room",
    "entrée": "entrance",
    "jardin": "garden",
    "terrasse": "terrace",
    "balcon": "balcony",
    "garage": "garage",
    "grenier": "attic",
    "cave": "basement",
    # Sizes
    "petit": "small",
    "petite": "small",
    "grand": "large",
    "grande": "large",
    "moyen": "medium",
    "moyenne": "medium",
    # Appliances
    "réfrigérateur": "refrigerator",
    "frigo": "fridge",
    "four": "oven",
    "micro-ondes": "microwave",
    "micro ondes": "microwave",
    "lave-vaisselle": "dishwasher",
    "lave vaisselle": "dishwasher",
    "machine à laver": "washing machine",
    "télévision": "television",
    "télé": "tv",
    "ordinateur": "computer",
    "climatiseur": "air conditioner",
    "ventilateur": "fan",
    # Other
    "neuf": "new",
    "neuve": "new",
    "occasion": "used",
    "usagé": "used",
    "confortable": "comfortable",
    "élégant": "elegant",
    "pratique": "practical",
    "solide": "solid",
    "léger": "light",
    "lourd": "heavy",
    "lourde": "heavy",
}
