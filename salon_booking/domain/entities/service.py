from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Service:
    id: str
    title: str
    price: int
    duration: int  # minutes
    category: str
    description: str | None = None
