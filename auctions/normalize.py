"""
Text normalization and the vocabulary tables that map filter choices to
the values stored on listing records.

Every table maps a UI-facing value (slug) to the tuple of record values it
accepts. Records come from English and Brazilian sources, so both spellings
are listed. Adding vocabulary means adding rows here; the evaluator only
ever calls ``accepted_values``.
"""
import re
import unicodedata
from typing import Any, Dict, Mapping, Tuple

from .config import config

_WS = re.compile(r"\s+")


def normalize_text(s: Any) -> str:
    """Strip accents, lowercase and collapse whitespace. Idempotent."""
    if not s or not isinstance(s, str):
        return ""
    decomposed = unicodedata.normalize("NFD", s)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _WS.sub(" ", stripped.lower()).strip()


def text_equals(a: Any, b: Any) -> bool:
    """Compare two values ignoring case, accents and spacing."""
    return normalize_text(a) == normalize_text(b)


def is_unconstrained(value: Any) -> bool:
    """True for None, empty strings and the "all" sentinel."""
    if value is None:
        return True
    if isinstance(value, str):
        v = value.strip()
        return not v or v.lower() == config.ALL
    return False


# Format filter: "auction" covers every live format, "direct-sale" only one
FORMAT_GROUPS: Dict[str, Tuple[str, ...]] = {
    "auction": ("In-person", "Online", "Hybrid", "Presencial", "Híbrido"),
    "direct-sale": ("Direct Sale", "Venda Direta"),
}

ORIGIN_LABELS: Dict[str, Tuple[str, ...]] = {
    "judicial": ("Judicial",),
    "extrajudicial": ("Extrajudicial",),
    "private": ("Private", "Particular"),
    "public": ("Public", "Público"),
}

STAGE_LABELS: Dict[str, Tuple[str, ...]] = {
    "single-round": ("Single round", "Praça única"),
    "first": ("1st round", "1ª Praça"),
    "second": ("2nd round", "2ª Praça"),
    "third": ("3rd round", "3ª Praça"),
}

VEHICLE_TYPE_GROUPS: Dict[str, Tuple[str, ...]] = {
    "cars": ("Car", "Carro"),
    "motorcycles": ("Motorcycle", "Moto"),
    "trucks": ("Truck", "Caminhão"),
    "buses": ("Bus", "Ônibus"),
    "machinery": ("Machine", "Máquina"),
    "support": ("Trailer", "Reboque"),
    "boats": ("Boat", "Embarcação"),
    "recreational": ("Recreational", "Recreativo"),
    "not-informed": ("Not informed", "Não Informado"),
}

PROPERTY_TYPE_GROUPS: Dict[str, Tuple[str, ...]] = {
    "apartments": ("Apartment", "Apartamento"),
    "houses": ("House", "Casa"),
    "commercial": ("Commercial", "Comercial"),
    "compact": ("Compact", "Compacto"),
    "condominiums": ("Condominium", "Condomínio"),
    "warehouses": ("Warehouse", "Galpão"),
    "garage": ("Garage", "Garagem"),
    "lodging": ("Lodging", "Hospedagem"),
    "industrial": ("Industrial",),
    "mixed-use": ("Mixed-use", "Misto"),
    "buildings": ("Building", "Prédio"),
    "rural": ("Rural",),
    "land-and-lots": ("Land", "Terreno"),
    "not-informed": ("Not informed", "Não Informado"),
}

# Sub-type slugs in navigation order
VEHICLE_TYPES: Tuple[str, ...] = (config.ALL,) + tuple(VEHICLE_TYPE_GROUPS)
PROPERTY_TYPES: Tuple[str, ...] = (config.ALL,) + tuple(PROPERTY_TYPE_GROUPS)

SUB_TYPE_LABELS: Dict[str, str] = {
    config.ALL: "All",
    "cars": "Cars",
    "motorcycles": "Motorcycles",
    "trucks": "Trucks",
    "buses": "Buses",
    "machinery": "Machinery",
    "support": "Support",
    "boats": "Boats",
    "recreational": "Recreational",
    "not-informed": "Not informed",
    "apartments": "Apartments",
    "houses": "Houses",
    "commercial": "Commercial",
    "compact": "Compact",
    "condominiums": "Condominiums",
    "warehouses": "Warehouses",
    "garage": "Garage",
    "lodging": "Lodging",
    "industrial": "Industrial",
    "mixed-use": "Mixed-use",
    "buildings": "Buildings",
    "rural": "Rural",
    "land-and-lots": "Land and Lots",
}

# Deprecated slugs still found in bookmarks and saved preferences
LEGACY_SUB_TYPES: Dict[str, Dict[str, str]] = {
    "vehicle": {"trailers": "support", "scrap": "not-informed"},
    "property": {"vacant-land": "land-and-lots"},
}

TYPE_GROUPS: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "vehicle": VEHICLE_TYPE_GROUPS,
    "property": PROPERTY_TYPE_GROUPS,
}


def accepted_values(table: Mapping[str, Tuple[str, ...]], key: str) -> Tuple[str, ...]:
    """Record values accepted for ``key``; unknown keys accept themselves."""
    return table.get(key) or table.get(normalize_text(key)) or (key,)


def matches_any(value: Any, accepted: Tuple[str, ...]) -> bool:
    return any(text_equals(value, a) for a in accepted)


def canonical_sub_type(category: str, slug: Any) -> str:
    """Lowercase a sub-type slug and rewrite deprecated ones."""
    if is_unconstrained(slug):
        return config.ALL
    s = str(slug).strip().lower()
    return LEGACY_SUB_TYPES.get(category, {}).get(s, s)


def is_known_sub_type(category: str, slug: str) -> bool:
    return canonical_sub_type(category, slug) in (
        VEHICLE_TYPES if category == "vehicle" else PROPERTY_TYPES
    )


def sub_type_label(slug: str) -> str:
    return SUB_TYPE_LABELS.get(slug, slug)
