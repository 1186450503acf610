# tests/application/services/test_snippet_generator.py
from application.services.base_url_resolver import BaseUrlResolver
from application.services.snippet_generator import SnippetGenerator
from domain.test_case import TestCase


def make_generator():
    return SnippetGenerator(BaseUrlResolver("http://api.test").resolve_url)


POST_TEST = TestCase(
    id="t",
    name="create",
    method="POST",
    endpoint="/users",
    headers={"X-Key": "{{API_KEY}}"},
    body={"name": "bob"},
)


def test_curl_snippet():
    snippet = make_generator().generate(POST_TEST, "curl")

    assert snippet.startswith("curl -X POST 'http://api.test/users'")
    assert "-H 'X-Key: {{API_KEY}}'" in snippet
    assert "-H 'Content-Type: application/json'" in snippet
    assert "-d '{\"name\": \"bob\"}'" in snippet


def test_fetch_snippet():
    snippet = make_generator().generate(POST_TEST, "fetch")

    assert "fetch('http://api.test/users'" in snippet
    assert "method: 'POST'" in snippet
    assert "JSON.stringify(" in snippet
    assert snippet.endswith("const data = await response.json();")


def test_python_snippet():
    snippet = make_generator().generate(POST_TEST, "python")

    assert snippet.startswith("import requests")
    assert "response = requests.post(url, headers=headers, json=data)" in snippet


def test_get_without_headers_has_no_body():
    test = TestCase(id="t", name="list", endpoint="https://other.test/items", body={"ignored": True})

    snippet = make_generator().generate(test, "python")

    assert "url = 'https://other.test/items'" in snippet
    assert "response = requests.get(url)" in snippet
    assert "data =" not in snippet


def test_unknown_format_is_empty():
    assert make_generator().generate(POST_TEST, "httpie") == ""
