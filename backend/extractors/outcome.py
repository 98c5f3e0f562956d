"""
Outcome Module
The three-way result of reading a receipt: Identified, Unidentified or Failure.
"""

from dataclasses import dataclass
from typing import Union

from .regex_extractor import ExtractionResult


@dataclass(frozen=True)
class Identified:
    """The receipt matched a signature and its fields were extracted."""
    result: ExtractionResult

    success = True

    def to_dict(self) -> dict:
        return {"success": True, **self.result.to_dict()}


@dataclass(frozen=True)
class Unidentified:
    """The text matched no known signature. Not an error."""

    success = False

    def to_dict(self) -> dict:
        return {"success": False}


@dataclass(frozen=True)
class Failure:
    """An unexpected fault or invalid input."""
    message: str

    success = False

    def to_dict(self) -> dict:
        return {"success": False, "error": self.message}


Outcome = Union[Identified, Unidentified, Failure]
