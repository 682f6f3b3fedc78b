#domain/services/card_builder.py --> Company -> CompanyCard (render key, dial link, region label)
from collections import Counter
from typing import List, Optional, Sequence

from domain.models.company import Company
from domain.models.company_card import CompanyCard
from domain.services.disclosure import DEFAULT_MARKER, DEFAULT_THRESHOLD, short_label


def tel_href(contact: Optional[str]) -> str:
    if not contact:
        return ""
    return f"tel:{contact}"


def _text(value) -> str:
    return "" if value is None else str(value)


def render_keys(companies: Sequence[Company]) -> List[str]:
    """
    One unique key per company.

    A name that appears once is its own key. Duplicated or missing names get
    "<name>#<index>" with the position in the given list, plus "~<n>" when that
    text is already some other company's key.
    """
    names = [_text(c.name) for c in companies]
    counts = Counter(names)
    used = {n for n in names if n and counts[n] == 1}
    keys: List[str] = []
    for i, name in enumerate(names):
        if name and counts[name] == 1:
            keys.append(name)
            continue
        key = f"{name}#{i}"
        bump = 0
        while key in used:
            bump += 1
            key = f"{name}#{i}~{bump}"
        used.add(key)
        keys.append(key)
    return keys


def build_cards(
    companies: Sequence[Company],
    threshold: int = DEFAULT_THRESHOLD,
    marker: str = DEFAULT_MARKER,
    keys: Optional[Sequence[str]] = None,
) -> List[CompanyCard]:
    """Cards in list order. Pass `keys` to keep keys stable across filtered views."""
    if keys is None:
        keys = render_keys(companies)
    cards: List[CompanyCard] = []
    for key, c in zip(keys, companies):
        region = _text(c.region)
        cards.append(CompanyCard(
            key=key,
            grade=_text(c.grade),
            name=_text(c.name),
            contact=_text(c.contact),
            tel_href=tel_href(_text(c.contact)),
            short_region=short_label(region, threshold, marker),
            full_region=region,
        ))
    return cards
