from typing import Dict

# Public pages that can host sections, in navigation order
PAGES: Dict[str, str] = {
    "home": "Accueil",
    "services": "Services",
    "activities": "Activités",
    "contact": "Contact",
}


def is_known_page(page: str) -> bool:
    return page in PAGES


def page_name(page: str) -> str:
    return PAGES.get(page, page)
