"""Tests for the command-line interface."""

import json

import httpx
import pytest
from click.testing import CliRunner

from gql_jddf import cli
from gql_jddf.core.executor import GraphQLError

from conftest import document, named, object_type, wrap


@pytest.fixture
def runner():
    return CliRunner()


class TestConvertCommand:
    """Tests for ``gql-jddf convert``."""

    def test_stdin_to_stdout(self, runner, query_document):
        result = runner.invoke(cli.main, ["convert"], input=json.dumps(query_document))
        assert result.exit_code == 0
        schema = json.loads(result.output)
        assert schema["ref"] == "Query"
        assert schema["definitions"]["Query"]["properties"] == {"id": {"ref": "String"}}

    def test_input_and_output_files(self, runner, query_document, tmp_path):
        source = tmp_path / "introspection.json"
        target = tmp_path / "schema.json"
        source.write_text(json.dumps(query_document))

        result = runner.invoke(cli.main, ["convert", "-i", str(source), "-o", str(target), "--indent", "2"])

        assert result.exit_code == 0
        assert json.loads(target.read_text())["definitions"]["Int"] == {"type": "int32"}

    def test_scalar_option(self, runner):
        doc = document([{"kind": "SCALAR", "name": "DateTime"}])
        result = runner.invoke(cli.main, ["convert", "-s", "DateTime=timestamp"], input=json.dumps(doc))
        assert result.exit_code == 0
        assert json.loads(result.output)["definitions"]["DateTime"] == {"type": "timestamp"}

    def test_bad_scalar_option(self, runner, query_document):
        result = runner.invoke(cli.main, ["convert", "-s", "DateTime=date"], input=json.dumps(query_document))
        assert result.exit_code == 2

    def test_malformed_envelope(self, runner):
        result = runner.invoke(cli.main, ["convert"], input=json.dumps({"data": {}}))
        assert result.exit_code == 1
        assert "no schema in graphql response" in result.output
        assert '"definitions"' not in result.output

    def test_too_deep(self, runner):
        doc = document([object_type("Query", {"x": wrap(named("Int"), 9)})])
        result = runner.invoke(cli.main, ["convert"], input=json.dumps(doc))
        assert result.exit_code == 1
        assert "type nesting too deep" in result.output

    def test_sdl_input(self, runner):
        sdl = "type Query { id: ID! }"
        result = runner.invoke(cli.main, ["convert", "--sdl"], input=sdl)
        assert result.exit_code == 0
        assert json.loads(result.output)["definitions"]["Query"]["properties"] == {"id": {"ref": "ID"}}

    def test_invalid_sdl(self, runner):
        result = runner.invoke(cli.main, ["convert", "--sdl"], input="type Query {")
        assert result.exit_code == 1
        assert "invalid schema definition" in result.output

    def test_deeply_nested_json(self, runner):
        text = '{"data": ' + "[" * 100000 + "]" * 100000 + "}"
        result = runner.invoke(cli.main, ["convert"], input=text)
        assert result.exit_code == 1
        assert "nested too deeply" in result.output

    def test_sdl_not_utf8(self, runner):
        result = runner.invoke(cli.main, ["convert", "--sdl"], input=b"type Query { id: ID! } \xff\xfe")
        assert result.exit_code == 1
        assert "invalid schema definition" in result.output

    def test_invalid_json(self, runner):
        result = runner.invoke(cli.main, ["convert"], input="{oops")
        assert result.exit_code == 1
        assert "invalid JSON input" in result.output


class TestIntrospectCommand:
    """Tests for ``gql-jddf introspect``."""

    def test_writes_document(self, runner, monkeypatch):
        calls = []

        async def fake_fetch(url, auth, timeout):
            calls.append((url, auth.get_headers(), timeout))
            return {"data": {"__schema": {"queryType": {"name": "Query"}, "types": []}}}

        monkeypatch.setattr(cli, "_fetch", fake_fetch)
        result = runner.invoke(cli.main, [
            "introspect", "--url", "http://example.test/graphql",
            "--bearer", "abc", "-H", "x-tenant=t1", "--timeout", "5",
        ])

        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["__schema"]["queryType"]["name"] == "Query"
        assert calls == [(
            "http://example.test/graphql",
            {"Authorization": "Bearer abc", "x-tenant": "t1"},
            5.0,
        )]

    @pytest.mark.parametrize("error", [
        GraphQLError("GraphQL errors: nope", [{"message": "nope"}]),
        httpx.ConnectError("connection refused"),
    ])
    def test_failures(self, runner, monkeypatch, error):
        async def fake_fetch(url, auth, timeout):
            raise error

        monkeypatch.setattr(cli, "_fetch", fake_fetch)
        result = runner.invoke(cli.main, ["introspect", "--url", "http://example.test/graphql"])
        assert result.exit_code == 1

    def test_bad_header(self, runner):
        result = runner.invoke(cli.main, ["introspect", "--url", "http://x", "-H", "nonsense"])
        assert result.exit_code == 2


class TestQueryCommand:
    """Tests for ``gql-jddf query``."""

    def test_prints_query(self, runner):
        result = runner.invoke(cli.main, ["query"])
        assert result.exit_code == 0
        assert "__schema" in result.output
