"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry already-parsed primitive input from the CLI (or any other
adapter) into the use cases.  They carry no validation of their own;
the entities and value objects do that.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateCategoryDTO:
    name: str
    description: str = ""


@dataclass(frozen=True)
class UpdateCategoryDTO:
    id: str
    name: str
    description: str = ""


@dataclass(frozen=True)
class CreateProductDTO:
    name: str
    price: float
    category_id: str
    description: str = ""


@dataclass(frozen=True)
class UpdateProductDTO:
    id: str
    name: str
    price: float
    category_id: str
    description: str = ""
