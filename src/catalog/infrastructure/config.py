"""Runtime settings, read from the environment.

CATALOG_DATA_DIR     directory holding categories.json / products.json
CATALOG_PRICE_BANDS  optional JSON file overriding the price band table
CATALOG_LOG_LEVEL    logging level name (default WARNING)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class CatalogSettings:
    data_dir: Path = _DEFAULT_DATA_DIR
    price_bands_file: Path | None = None
    log_level: str = "WARNING"

    @property
    def categories_file(self) -> Path:
        return self.data_dir / "categories.json"

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> CatalogSettings:
        env = os.environ if environ is None else environ
        bands = env.get("CATALOG_PRICE_BANDS")
        return CatalogSettings(
            data_dir=Path(env.get("CATALOG_DATA_DIR") or _DEFAULT_DATA_DIR),
            price_bands_file=Path(bands) if bands else None,
            log_level=env.get("CATALOG_LOG_LEVEL", "WARNING").upper(),
        )
