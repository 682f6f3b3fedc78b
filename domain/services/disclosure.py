#domain/services/disclosure.py --> region truncation + reveal/dismiss transitions
from typing import Optional

from domain.models.disclosure_state import Collapsed, DisclosureState, Revealed

DEFAULT_MARKER = "..."
DEFAULT_THRESHOLD = 10      # card grid
COMPACT_THRESHOLD = 7       # narrow card variant


def short_label(region: Optional[str], threshold: int = DEFAULT_THRESHOLD, marker: str = DEFAULT_MARKER) -> str:
    """
    First `threshold` characters of region plus marker when region is longer,
    otherwise region unchanged.

        short_label("Seoul Gangnam-gu Teheran-ro 123", 10) -> "Seoul Gang..."
    """
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
        raise ValueError(f"threshold must be a non-negative int, got {threshold!r}")
    if region is None:
        return ""
    if len(region) <= threshold:
        return region
    return f"{region[:threshold]}{marker}"


def request_reveal(state: DisclosureState, region: Optional[str]) -> Revealed:
    # any previously revealed region is replaced, never stacked
    return Revealed(text=region or "")


def dismiss(state: DisclosureState) -> Collapsed:
    return Collapsed()


def revealed_text(state: DisclosureState) -> Optional[str]:
    return state.text if isinstance(state, Revealed) else None
