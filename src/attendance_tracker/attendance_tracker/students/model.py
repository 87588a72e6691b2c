from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a roster entry keyed by its roll number."""

    roll_number: str
    name: Optional[str] = None
    branch: Optional[str] = None
    year: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "rollnum": self.roll_number,
            "branch": self.branch,
            "year": self.year,
        }
