# tests/application/services/test_variable_store.py
from application.services.variable_store import VariableStore
from domain.path import UNDEFINED


class StaticEnvironment:
    def __init__(self, variables):
        self.variables = variables

    def get_variables(self):
        return self.variables


class TestLookup:
    def test_runtime_shadows_environment(self):
        store = VariableStore(StaticEnvironment({"token": "env"}))
        store.set("token", "runtime")
        assert store.get("token") == "runtime"

    def test_falls_back_to_environment(self):
        store = VariableStore(StaticEnvironment({"BASE_URL": "http://api"}))
        assert store.get("BASE_URL") == "http://api"

    def test_missing_is_undefined(self):
        assert VariableStore().get("nope") is UNDEFINED

    def test_empty_string_counts_as_set(self):
        store = VariableStore(StaticEnvironment({"prefix": ""}))
        assert store.interpolate("a{{prefix}}b") == "ab"

    def test_environment_is_read_live(self):
        env = StaticEnvironment({"k": "one"})
        store = VariableStore(env)
        env.variables = {"k": "two"}
        assert store.get("k") == "two"

    def test_clear_only_drops_runtime_layer(self):
        store = VariableStore(StaticEnvironment({"k": "env"}))
        store.set("k", "runtime")
        store.set("other", 1)

        store.clear()

        assert store.get("k") == "env"
        assert store.get("other") is UNDEFINED
        assert store.runtime_snapshot() == {}


class TestInterpolate:
    def test_replaces_known_placeholders(self):
        store = VariableStore()
        store.set("id", 42)
        assert store.interpolate("/users/{{id}}") == "/users/42"

    def test_unresolved_placeholder_left_intact(self):
        assert VariableStore().interpolate("/users/{{missing}}") == "/users/{{missing}}"

    def test_non_strings_use_json_spelling(self):
        store = VariableStore()
        store.set("flag", True)
        store.set("nothing", None)
        store.set("obj", {"a": 1})
        assert store.interpolate("{{flag}}|{{nothing}}|{{obj}}") == 'true|null|{"a": 1}'

    def test_non_string_input_passthrough(self):
        assert VariableStore().interpolate(5) == 5

    def test_interpolate_object_walks_containers(self):
        store = VariableStore()
        store.set("name", "bob")
        body = {"user": {"name": "{{name}}", "tags": ["{{name}}", 3]}, "n": 1}

        result = store.interpolate_object(body)

        assert result == {"user": {"name": "bob", "tags": ["bob", 3]}, "n": 1}
        assert body["user"]["name"] == "{{name}}"
