"""DrinkRecord: the part of an upstream drink we turn into a Product."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DrinkRecord:
    name: str
    thumbnail: str | None = None
