# infrastructure/collection/yaml_loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from infrastructure.collection.base_loader import CollectionLoadError, CollectionLoaderBase


class YamlCollectionLoader(CollectionLoaderBase):
    """
    YAML variant of the export format, e.g.

        name: users
        tests:
          - name: login
            method: POST
            endpoint: /accounts/login/
            body: {email: a@example.com, password: "{{PASSWORD}}"}
            extract: {token: access}
    """

    def _load_file(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CollectionLoadError(f"Invalid YAML in {path}: {e}") from e
