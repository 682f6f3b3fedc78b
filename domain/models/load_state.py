# domain/models/load_state.py
from dataclasses import dataclass, field
from typing import Tuple, Union

from domain.models.company import Company


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Ready:
    companies: Tuple[Company, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Failed:
    message: str


LoadState = Union[Loading, Ready, Failed]
