# infrastructure/collection/__init__.py
from infrastructure.collection.base_loader import CollectionLoadError, CollectionLoaderBase
from infrastructure.collection.json_loader import JsonCollectionLoader
from infrastructure.collection.loader_registry import CollectionLoaderRegistry
from infrastructure.collection.yaml_loader import YamlCollectionLoader

__all__ = [
    "CollectionLoadError",
    "CollectionLoaderBase",
    "CollectionLoaderRegistry",
    "YamlCollectionLoader",
    "JsonCollectionLoader",
]
