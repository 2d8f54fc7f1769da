"""The fixed product catalog served by the API.

Image paths are relative to the frontend's public folder.
"""

CATALOG = (
    {
        "id": "hat-01",
        "title": "Gorro Clásico",
        "description": "Gorro tejido clásico, abrigado y cómodo para el día a día.",
        "price": "19.99",
        "images": ["/GorroNY.JPG"],
        "category": "hats",
        "colors": ["negro", "gris", "azul"],
        "sizes": ["única"],
        "stock": 42,
        "featured": True,
    },
    {
        "id": "hat-02",
        "title": "Beanie Urbano",
        "description": "Estilo urbano con tejido elástico y suave.",
        "price": "24.99",
        "images": ["/GorroNY.JPG"],
        "category": "hats",
        "colors": ["negro", "verde"],
        "sizes": ["única"],
        "stock": 25,
        "featured": False,
    },
    {
        "id": "hoodie-01",
        "title": "Sudadera Básica",
        "description": "Sudadera con capucha de algodón orgánico, ultra cómoda.",
        "price": "39.99",
        "images": ["/hoodie_PNG25-1774699148.png"],
        "category": "hoodies",
        "colors": ["negro", "blanco", "azul"],
        "sizes": ["S", "M", "L", "XL"],
        "stock": 30,
        "featured": True,
    },
    {
        "id": "hoodie-02",
        "title": "Sudadera Oversize",
        "description": "Corte oversize para un look relajado, interior afelpado.",
        "price": "49.99",
        "images": ["/sudaderaoversize.png"],
        "category": "hoodies",
        "colors": ["gris", "beige"],
        "sizes": ["M", "L", "XL"],
        "stock": 12,
        "featured": False,
    },
)
