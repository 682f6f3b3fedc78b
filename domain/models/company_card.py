#domain/models/company_card.py --> one rendered card in the directory grid
from dataclasses import dataclass


@dataclass(frozen=True)
class CompanyCard:
    key: str            # unique render key, name or "<name>#<index>" on collisions
    grade: str          # shown above the name
    name: str
    contact: str        # visible phone number
    tel_href: str       # "tel:010-1111-2222"
    short_region: str   # truncated label
    full_region: str    # text surfaced by reveal
