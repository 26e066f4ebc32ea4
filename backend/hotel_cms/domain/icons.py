from typing import Dict, List, Optional

_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="none" '
    'stroke="currentColor" stroke-width="2" stroke-linecap="round" '
    'stroke-linejoin="round">{}</svg>'
)


def _icon(name: str, category: str, body: str) -> Dict[str, str]:
    return {"name": name, "category": category, "svg": _SVG.format(body)}


ICONS: Dict[str, Dict[str, str]] = {
    "check": _icon("Coche", "general", '<polyline points="20 6 9 17 4 12"/>'),
    "star": _icon(
        "Étoile",
        "general",
        '<polygon points="12 2 15.09 8.26 22 9.27 17 14.14 18.18 21.02 '
        '12 17.77 5.82 21.02 7 14.14 2 9.27 8.91 8.26 12 2"/>',
    ),
    "heart": _icon(
        "Cœur",
        "general",
        '<path d="M20.8 4.6a5.5 5.5 0 0 0-7.8 0L12 5.7l-1-1.1a5.5 5.5 0 0 0-7.8 '
        '7.8l1 1.1L12 21l7.8-7.5 1-1.1a5.5 5.5 0 0 0 0-7.8z"/>',
    ),
    "wifi": _icon(
        "Wi-Fi",
        "amenities",
        '<path d="M5 12.55a11 11 0 0 1 14.08 0"/><path d="M1.42 9a16 16 0 0 1 '
        '21.16 0"/><path d="M8.53 16.11a6 6 0 0 1 6.95 0"/>'
        '<line x1="12" y1="20" x2="12.01" y2="20"/>',
    ),
    "parking": _icon(
        "Parking",
        "amenities",
        '<rect x="3" y="3" width="18" height="18" rx="2"/>'
        '<path d="M9 17V7h4a3 3 0 0 1 0 6H9"/>',
    ),
    "pool": _icon(
        "Piscine",
        "amenities",
        '<path d="M2 18c2 0 2-1 4-1s2 1 4 1 2-1 4-1 2 1 4 1 2-1 4-1"/>'
        '<path d="M8 14V5a2 2 0 0 1 4 0"/><path d="M16 14V5a2 2 0 0 0-4 0"/>',
    ),
    "coffee": _icon(
        "Petit-déjeuner",
        "dining",
        '<path d="M18 8h1a4 4 0 0 1 0 8h-1"/><path d="M2 8h16v9a4 4 0 0 1-4 '
        '4H6a4 4 0 0 1-4-4V8z"/>',
    ),
    "restaurant": _icon(
        "Restaurant",
        "dining",
        '<path d="M3 2v7c0 1.1.9 2 2 2h4a2 2 0 0 0 2-2V2"/><path d="M7 2v20"/>'
        '<path d="M21 15V2a5 5 0 0 0-5 5v6c0 1.1.9 2 2 2h3zm0 0v7"/>',
    ),
    "bar": _icon(
        "Bar",
        "dining",
        '<path d="M8 22h8"/><path d="M12 11v11"/><path d="M19 3l-7 8-7-8z"/>',
    ),
    "bed": _icon(
        "Chambre",
        "rooms",
        '<path d="M2 4v16"/><path d="M2 8h18a2 2 0 0 1 2 2v10"/>'
        '<path d="M2 17h20"/><path d="M6 8v9"/>',
    ),
    "bath": _icon(
        "Salle de bain",
        "rooms",
        '<path d="M9 6 6.5 3.5a1.5 1.5 0 0 0-1-.5C4.7 3 4 3.7 4 4.5V17a2 2 0 0 0 '
        '2 2h12a2 2 0 0 0 2-2v-5"/><line x1="2" y1="12" x2="22" y2="12"/>',
    ),
    "snowflake": _icon(
        "Climatisation",
        "rooms",
        '<line x1="12" y1="2" x2="12" y2="22"/><line x1="2" y1="12" x2="22" y2="12"/>'
        '<line x1="5" y1="5" x2="19" y2="19"/><line x1="19" y1="5" x2="5" y2="19"/>',
    ),
    "bike": _icon(
        "Vélo",
        "activities",
        '<circle cx="5.5" cy="17.5" r="3.5"/><circle cx="18.5" cy="17.5" r="3.5"/>'
        '<path d="M15 6h2l3 11.5"/><path d="M5.5 17.5 9 9h6l-3 8.5"/>',
    ),
    "hiking": _icon(
        "Randonnée",
        "activities",
        '<path d="m8 3 4 8 5-5 5 15H2L8 3z"/>',
    ),
    "wine": _icon(
        "Œnologie",
        "activities",
        '<path d="M8 22h8"/><path d="M7 10h10"/><path d="M12 15v7"/>'
        '<path d="M12 15a5 5 0 0 0 5-5c0-2-.5-4-2-8H9c-1.5 4-2 6-2 8a5 5 0 0 0 5 5z"/>',
    ),
    "map-pin": _icon(
        "Localisation",
        "contact",
        '<path d="M21 10c0 7-9 13-9 13s-9-6-9-13a9 9 0 0 1 18 0z"/>'
        '<circle cx="12" cy="10" r="3"/>',
    ),
    "phone": _icon(
        "Téléphone",
        "contact",
        '<path d="M22 16.92v3a2 2 0 0 1-2.18 2 19.8 19.8 0 0 1-8.63-3.07 19.5 19.5 0 '
        '0 1-6-6A19.8 19.8 0 0 1 2.12 4.18 2 2 0 0 1 4.11 2h3a2 2 0 0 1 2 1.72c.13.96.36 '
        '1.9.7 2.81a2 2 0 0 1-.45 2.11L8.09 9.91a16 16 0 0 0 6 6l1.27-1.27a2 2 0 0 1 '
        '2.11-.45c.91.34 1.85.57 2.81.7A2 2 0 0 1 22 16.92z"/>',
    ),
    "mail": _icon(
        "E-mail",
        "contact",
        '<rect x="2" y="4" width="20" height="16" rx="2"/>'
        '<path d="m22 6-10 7L2 6"/>',
    ),
}


def get_icon(code: Optional[str]) -> Optional[Dict[str, str]]:
    if not code:
        return None
    return ICONS.get(code)


def is_known_icon(code: Optional[str]) -> bool:
    return get_icon(code) is not None


def icons_by_category() -> Dict[str, List[Dict[str, str]]]:
    grouped: Dict[str, List[Dict[str, str]]] = {}
    for code, icon in ICONS.items():
        grouped.setdefault(icon["category"], []).append({"code": code, **icon})
    return grouped
