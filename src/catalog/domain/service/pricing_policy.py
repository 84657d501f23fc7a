"""Per-category acceptable price bands.

The band table is plain configuration injected into ProductDomainService,
so tests and deployments can substitute their own bands without touching
module-level state.  Categories not listed fall back to the default band.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from catalog.domain.exceptions import ValidationError


@dataclass(frozen=True)
class PriceBand:
    """Inclusive ``[min, max]`` price interval."""

    min: float
    max: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            raise ValidationError(
                f"Price band bounds must be finite, got [{self.min}, {self.max}]"
            )
        if self.min < 0 or self.max < self.min:
            raise ValidationError(
                f"Invalid price band [{self.min}, {self.max}]"
            )

    def contains(self, price: float) -> bool:
        return self.min <= price <= self.max

    def as_dict(self) -> dict[str, float]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class PriceBands:
    """Lookup table of price bands keyed by category id."""

    bands: Mapping[str, PriceBand] = field(default_factory=dict)
    default: PriceBand = PriceBand(1.00, 10000.00)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bands", MappingProxyType(dict(self.bands)))

    def band_for(self, category_id: str) -> PriceBand:
        return self.bands.get(category_id, self.default)

    @staticmethod
    def from_mapping(raw: Mapping) -> PriceBands:
        """Build from ``{"bands": {id: {"min", "max"}}, "default": {...}}``.

        A missing ``default`` keeps the built-in default band.
        """
        raw_bands = raw.get("bands", {})
        if not isinstance(raw_bands, Mapping):
            raise ValidationError(
                'Malformed price band table: "bands" must be an object'
            )
        try:
            bands = {
                str(key): PriceBand(float(band["min"]), float(band["max"]))
                for key, band in raw_bands.items()
            }
            if "default" in raw:
                default = PriceBand(
                    float(raw["default"]["min"]), float(raw["default"]["max"])
                )
                return PriceBands(bands=bands, default=default)
        except (KeyError, TypeError, ValueError) as exc:
            raise ValidationError(f"Malformed price band table: {exc}") from exc
        return PriceBands(bands=bands)


DEFAULT_PRICE_BANDS = PriceBands(
    bands={
        "category_1": PriceBand(10.00, 1000.00),
        "category_2": PriceBand(50.00, 2000.00),
        "category_3": PriceBand(100.00, 5000.00),
    },
    default=PriceBand(1.00, 10000.00),
)


def load_price_bands(path: Path) -> PriceBands:
    """Read a band table from a JSON file."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValidationError(f"Price band file {path} cannot be read: {exc}") from exc
    except ValueError as exc:
        raise ValidationError(f"Price band file {path} is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValidationError(f"Price band file {path} must hold a JSON object")
    return PriceBands.from_mapping(raw)
