from __future__ import annotations

from pathlib import Path

import pytest

from domain.assertions import JsonPathAssertion
from infrastructure.collection import CollectionLoadError, CollectionLoaderRegistry, YamlCollectionLoader


def test_load_yaml_collection(tmp_path: Path) -> None:
    path = tmp_path / "auth.yaml"
    path.write_text(
        "\n".join(
            [
                "name: auth",
                "tests:",
                "  - name: login",
                "    method: POST",
                "    endpoint: /accounts/login/",
                "    body: {email: a@example.com, password: \"{{PASSWORD}}\"}",
                "    extract: {token: access}",
                "    assertions:",
                "      - {type: json_path, path: access, operator: ne, value: null}",
            ]
        ),
        encoding="utf-8",
    )

    collection = YamlCollectionLoader().load_from_file(path)

    test = collection.tests[0]
    assert collection.name == "auth"
    assert test.method == "POST"
    assert test.body == {"email": "a@example.com", "password": "{{PASSWORD}}"}
    assert test.extract == {"token": "access"}
    assert test.assertions == [JsonPathAssertion(path="access", operator="ne", value=None)]


def test_empty_yaml(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    with pytest.raises(CollectionLoadError, match="empty"):
        YamlCollectionLoader().load_from_file(path)


def test_yaml_must_be_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(CollectionLoadError, match="invalid"):
        YamlCollectionLoader().load_from_file(path)


def test_registry_handles_yml() -> None:
    assert isinstance(CollectionLoaderRegistry().get_loader(Path("x.YML")), YamlCollectionLoader)
