"""Category aggregate.

A category groups products.  It can be switched on and off; products
refer to it only by id, so the category never owns or cascades to them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.ids import new_id
from catalog.domain.model.value_objects import CategoryName


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    # Naive timestamps from older records are taken to be UTC.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass
class Category:
    """Aggregate root for catalog categories.

    Use ``Category.create()`` for new categories; it validates raw
    input.  The ``__init__`` takes already-built value objects so
    repositories can reconstitute persisted categories.

    Invariants:
    - ``updated_at`` is never earlier than ``created_at``
    - ``id`` and ``created_at`` never change after construction
    """

    name: CategoryName
    description: str = ""
    id: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.created_at = _as_utc(self.created_at)
        if self.updated_at is None:
            self.updated_at = self.created_at
        self.updated_at = _as_utc(self.updated_at)
        if self.updated_at < self.created_at:
            raise ValidationError(
                f"Category {self.id} updated_at precedes created_at"
            )

    # --- Factory (used for NEW categories only) -------------------------------

    @staticmethod
    def create(name: str, description: str, id: str | None = None) -> Category:
        """Create a new, active category.

        Both timestamps are set to the same instant and an id is
        generated when none is supplied.
        """
        category_name = CategoryName(name)
        if id is None or not id.strip():
            id = new_id("category")
        return Category(name=category_name, description=description, id=id)

    # --- Mutations ------------------------------------------------------------

    def update_name(self, name: str) -> None:
        self.name = CategoryName(name)
        self._touch()

    def update_description(self, description: str) -> None:
        self.description = description
        self._touch()

    def activate(self) -> None:
        """Mark the category active.  Calling it twice is not an error."""
        self.is_active = True
        self._touch()

    def deactivate(self) -> None:
        """Mark the category inactive.  Calling it twice is not an error."""
        self.is_active = False
        self._touch()

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        self.updated_at = max(_now(), self.created_at)
