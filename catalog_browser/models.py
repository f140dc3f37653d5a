"""Catalog records shown on the snack and combo admin screens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Snack:
    id: int
    name: str
    description: str = ""
    category: str = ""
    price: float = 0.0
    quantity: int = 0
    size: str = ""
    status: str = "AVAILABLE"
    img: Optional[str] = None


@dataclass(frozen=True)
class Combo:
    id: int
    name: str
    description: str = ""
    price: float = 0.0
    status: str = "AVAILABLE"
    img: Optional[str] = None
