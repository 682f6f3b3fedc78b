# infrastructure/reporting/card_table_writer.py

from __future__ import annotations
from dataclasses import asdict, fields
from pathlib import Path
from typing import List, Sequence

import pandas as pd

from domain.models.company_card import CompanyCard

CARD_COLUMNS = [f.name for f in fields(CompanyCard)]
TEXT_COLUMNS = ["grade", "name", "contact", "short_region"]


def cards_frame(cards: Sequence[CompanyCard]) -> pd.DataFrame:
    """One row per card, columns in CompanyCard field order (empty frame keeps the columns)."""
    rows = [asdict(c) for c in cards]
    return pd.DataFrame(rows, columns=CARD_COLUMNS)


class CardTableWriter:
    """
    Renders the visible cards as a plain-text grid for the terminal
    or saves them to CSV.
    """

    def __init__(self, columns: List[str] | None = None) -> None:
        self.columns = columns or TEXT_COLUMNS

    def to_text(self, cards: Sequence[CompanyCard]) -> str:
        df = cards_frame(cards)
        if df.empty:
            return "No companies match."
        return df[self.columns].to_string(index=False)

    def save_csv(self, cards: Sequence[CompanyCard], path: Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        cards_frame(cards).to_csv(path, index=False, encoding="utf-8-sig")
        return path
