from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Union

from domain.test_case import Collection
from infrastructure.collection.base_loader import CollectionLoadError, CollectionLoaderBase
from infrastructure.collection.json_loader import JsonCollectionLoader
from infrastructure.collection.yaml_loader import YamlCollectionLoader


class CollectionLoaderRegistry:
    """Collection files by extension: .json, .yaml, .yml."""

    def __init__(self, loaders: Optional[Dict[str, CollectionLoaderBase]] = None) -> None:
        if loaders is None:
            yaml_loader = YamlCollectionLoader()
            loaders = {".json": JsonCollectionLoader(), ".yaml": yaml_loader, ".yml": yaml_loader}
        self._loaders = {ext.lower(): loader for ext, loader in loaders.items()}

    def extensions(self) -> List[str]:
        return sorted(self._loaders)

    def get_loader(self, path: Path) -> CollectionLoaderBase:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise CollectionLoadError(
                f"Unsupported collection format: {ext or '(none)'} (expected one of {', '.join(self.extensions())})"
            )
        return loader

    def load(self, path: Union[str, Path]) -> Collection:
        p = Path(path)
        return self.get_loader(p).load_from_file(p)
