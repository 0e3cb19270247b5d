"""
Initial indices loaded into an empty database on first start.

Categories in use: Conduite (driving side), Langue (alphabet/language),
Infra (street furniture), Meta (recurring visual cues).
"""

from __future__ import annotations

from .schemas import GeoIndice

INITIAL_INDICES: list[GeoIndice] = [
    GeoIndice(
        country="Japon",
        region="Asie de l'Est",
        category="Conduite",
        content="Au Japon, on conduit à gauche (comme au Royaume-Uni)",
        keywords=["gauche", "left-hand", "volant droit"],
    ),
    GeoIndice(
        country="Bulgarie",
        region="Europe de l'Est",
        category="Langue",
        content="La Bulgarie utilise l'alphabet cyrillique",
        keywords=["cyrillique", "cyrillic", "Б", "Д", "Ж"],
    ),
    GeoIndice(
        country="Brésil",
        region="Amérique du Sud",
        category="Langue",
        content="Au Brésil, on parle portugais (seul pays lusophone d'Amérique du Sud)",
        keywords=["português", "lusophone", "ão", "nh"],
    ),
    GeoIndice(
        country="Suède",
        region="Europe du Nord",
        category="Infra",
        content=(
            "Poteaux électriques suédois: souvent peints en blanc/rouge ou jaune, "
            "forme triangulaire à la base"
        ),
        keywords=["poteaux", "poles", "triangulaire", "blanc rouge"],
    ),
    GeoIndice(
        country="Australie",
        region="Océanie",
        category="Conduite",
        content="Conduite à gauche en Australie (héritage britannique)",
        keywords=["gauche", "left-hand", "commonwealth"],
    ),
    GeoIndice(
        country="Grèce",
        region="Europe du Sud",
        category="Langue",
        content="Alphabet grec utilisé en Grèce: Α, Β, Γ, Δ, Ω",
        keywords=["grec", "greek", "alpha", "omega", "Π"],
    ),
    GeoIndice(
        country="Afrique du Sud",
        region="Afrique australe",
        category="Meta",
        content="Pickup Toyota Hilux typique sur les routes sud-africaines",
        keywords=["hilux", "pickup", "voiture", "véhicule"],
    ),
]
