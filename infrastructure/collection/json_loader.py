from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from infrastructure.collection.base_loader import CollectionLoadError, CollectionLoaderBase


class JsonCollectionLoader(CollectionLoaderBase):
    def _load_file(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except ValueError as e:
            raise CollectionLoadError(f"Invalid JSON in {path}: {e}") from e
