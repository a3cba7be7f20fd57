"""
Region reference data used to populate the state and city dropdowns.

City lists are fetched by the caller; this module only shapes them.
"""
from typing import Any, Dict, Iterable, List, NamedTuple

from .config import config
from .normalize import normalize_text


class State(NamedTuple):
    id: int
    code: str
    name: str


BRAZILIAN_STATES: List[State] = [
    State(12, "AC", "Acre"),
    State(27, "AL", "Alagoas"),
    State(16, "AP", "Amapá"),
    State(13, "AM", "Amazonas"),
    State(29, "BA", "Bahia"),
    State(23, "CE", "Ceará"),
    State(53, "DF", "Distrito Federal"),
    State(32, "ES", "Espírito Santo"),
    State(52, "GO", "Goiás"),
    State(21, "MA", "Maranhão"),
    State(51, "MT", "Mato Grosso"),
    State(50, "MS", "Mato Grosso do Sul"),
    State(31, "MG", "Minas Gerais"),
    State(15, "PA", "Pará"),
    State(25, "PB", "Paraíba"),
    State(41, "PR", "Paraná"),
    State(26, "PE", "Pernambuco"),
    State(22, "PI", "Piauí"),
    State(33, "RJ", "Rio de Janeiro"),
    State(24, "RN", "Rio Grande do Norte"),
    State(43, "RS", "Rio Grande do Sul"),
    State(11, "RO", "Rondônia"),
    State(14, "RR", "Roraima"),
    State(42, "SC", "Santa Catarina"),
    State(35, "SP", "São Paulo"),
    State(28, "SE", "Sergipe"),
    State(17, "TO", "Tocantins"),
]


def state_options() -> List[Dict[str, str]]:
    return [{"value": config.ALL, "label": "All states"}] + [
        {"value": s.code, "label": f"{s.name} ({s.code})"} for s in BRAZILIAN_STATES
    ]


def region_options(items: Iterable[Any]) -> List[Dict[str, str]]:
    """
    Turn a fetched ``[{"id": ..., "name": ...}]`` list into dropdown options.

    Entries without an int id and a str name are skipped. Names are sorted
    accent-insensitively. An empty or missing list still yields the "all"
    option, so filtering works before the list has loaded.
    """
    names = [
        item["name"] for item in items or []
        if isinstance(item, dict)
        and isinstance(item.get("id"), int)
        and isinstance(item.get("name"), str)
    ]
    names.sort(key=normalize_text)
    return [{"value": config.ALL, "label": "All cities"}] + [
        {"value": n, "label": n} for n in names
    ]
