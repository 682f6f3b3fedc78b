# domain/models/disclosure_state.py
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Collapsed:
    pass


@dataclass(frozen=True)
class Revealed:
    text: str


DisclosureState = Union[Collapsed, Revealed]
