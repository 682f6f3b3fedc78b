# domain/models/company.py
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Company:
    name: Optional[str]        # "Alpha Gas Co", used as the render key
    contact: Optional[str]     # "010-1111-2222"
    region: Optional[str]      # free-text address, may be long
    industry: Optional[str]    # "gas", not searched
    grade: Optional[str]       # license grade label, display only

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Company":
        """
        Build a Company from one raw JSON object.

        No validation: missing keys become None and values are kept as-is,
        so a malformed record still reaches the card layer.
        """
        return cls(**{f.name: record.get(f.name) for f in fields(cls)})
