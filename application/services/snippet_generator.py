from __future__ import annotations

import json
from typing import Callable, Dict

from domain.test_case import BODYLESS_METHODS, TestCase

SNIPPET_FORMATS = ("curl", "fetch", "python")


def _indent_json(value, indent: int = 4) -> str:
    return json.dumps(value, indent=indent, ensure_ascii=False)


class SnippetGenerator:
    """
    Copy-pasteable request code for a test case. Placeholders are left as
    written; only the BASE_URL join is applied.
    """

    def __init__(self, resolve_endpoint: Callable[[str], str]):
        self._resolve_endpoint = resolve_endpoint

    def generate(self, test: TestCase, fmt: str = "curl") -> str:
        url = self._resolve_endpoint(test.endpoint)
        renderers: Dict[str, Callable[[TestCase, str], str]] = {
            "curl": self._curl,
            "fetch": self._fetch,
            "python": self._python,
        }
        render = renderers.get(fmt)
        if render is None:
            return ""
        return render(test, url)

    def _sends_body(self, test: TestCase) -> bool:
        return test.body is not None and test.method not in BODYLESS_METHODS

    def _curl(self, test: TestCase, url: str) -> str:
        cmd = f"curl -X {test.method} '{url}'"
        for key, value in test.headers.items():
            cmd += f" \\\n  -H '{key}: {value}'"
        if self._sends_body(test):
            cmd += " \\\n  -H 'Content-Type: application/json'"
            cmd += f" \\\n  -d '{json.dumps(test.body, ensure_ascii=False)}'"
        return cmd

    def _fetch(self, test: TestCase, url: str) -> str:
        headers = dict(test.headers)
        if self._sends_body(test):
            headers["Content-Type"] = "application/json"

        code = f"const response = await fetch('{url}', {{\n"
        code += f"  method: '{test.method}',\n"
        code += "  headers: " + _indent_json(headers).replace("\n", "\n  ") + ",\n"
        if self._sends_body(test):
            code += "  body: JSON.stringify(" + _indent_json(test.body).replace("\n", "\n  ") + ")\n"
        code += "});\n\nconst data = await response.json();"
        return code

    def _python(self, test: TestCase, url: str) -> str:
        code = "import requests\n\n"
        code += f"url = '{url}'\n"
        if test.headers:
            code += f"headers = {_indent_json(test.headers)}\n"
        if self._sends_body(test):
            code += f"data = {_indent_json(test.body)}\n"

        code += f"\nresponse = requests.{test.method.lower()}(url"
        if test.headers:
            code += ", headers=headers"
        if self._sends_body(test):
            code += ", json=data"
        code += ")\nprint(response.json())"
        return code
