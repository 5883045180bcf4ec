"""Tests for the pagerduty-extensions command line interface."""

import json

import pytest
import httpx
import respx
import yaml
from click.testing import CliRunner

from pagerduty_client.cli import cli

from conftest import BASE_URL


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def profile(tmp_path):
    """A profile file with a test API key."""
    path = tmp_path / "profile.yaml"
    path.write_text(yaml.safe_dump({"api_url": BASE_URL, "api_token": "test-key"}))
    return str(path)


@pytest.fixture
def extension_file(tmp_path):
    path = tmp_path / "extension.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "name": "Webhook",
                "endpoint_url": "https://example.com/hook",
                "extension_schema": {"id": "PJFWPEP", "type": "extension_schema_reference"},
                "extension_objects": [{"id": "PIJ90N7", "type": "service_reference"}],
                "config": {"notify_types": {"resolve": True}},
            }
        )
    )
    return str(path)


class TestCLI:
    """Tests for the CLI commands."""

    def test_list(self, runner, profile, extension_list_data):
        """Test listing with a name filter."""
        with respx.mock(base_url=BASE_URL) as router:
            route = router.get("/extensions").mock(
                return_value=httpx.Response(200, json=extension_list_data)
            )
            result = runner.invoke(cli, ["--profile", profile, "list", "--query", "Hook"])

        assert result.exit_code == 0, result.output
        assert route.calls.last.request.url.params["query"] == "Hook"
        assert route.calls.last.request.headers["Authorization"] == "Token token=test-key"
        output = json.loads(result.output)
        assert [e["id"] for e in output["extensions"]] == ["PZZZZZZ", "PJFWPEP"]

    def test_get(self, runner, profile, extension_data):
        """Test showing one extension."""
        with respx.mock(base_url=BASE_URL) as router:
            router.get("/extensions/PJFWPEP").mock(
                return_value=httpx.Response(200, json={"extension": extension_data})
            )
            result = runner.invoke(cli, ["--profile", profile, "get", "PJFWPEP"])

        assert result.exit_code == 0, result.output
        output = json.loads(result.output)
        assert output["id"] == "PJFWPEP"
        assert output["self"] == extension_data["self"]

    def test_create(self, runner, profile, extension_file):
        """Test creating an extension from a YAML file."""
        with respx.mock(base_url=BASE_URL) as router:
            route = router.post("/extensions").mock(
                return_value=httpx.Response(201, json={"extension": {"id": "PNEW", "name": "Webhook"}})
            )
            result = runner.invoke(cli, ["--profile", profile, "create", extension_file])

        assert result.exit_code == 0, result.output
        body = json.loads(route.calls.last.request.content)
        assert body["name"] == "Webhook"
        assert body["config"] == {"notify_types": {"resolve": True}}
        assert json.loads(result.output)["id"] == "PNEW"

    def test_update(self, runner, profile, tmp_path):
        """Test updating with a file holding the API envelope."""
        path = tmp_path / "update.json"
        path.write_text(json.dumps({"extension": {"name": "Renamed"}}))

        with respx.mock(base_url=BASE_URL) as router:
            route = router.put("/extensions/PJFWPEP").mock(
                return_value=httpx.Response(200, json={"extension": {"id": "PJFWPEP", "name": "Renamed"}})
            )
            result = runner.invoke(cli, ["--profile", profile, "update", "PJFWPEP", str(path)])

        assert result.exit_code == 0, result.output
        assert json.loads(route.calls.last.request.content) == {"name": "Renamed"}

    def test_delete(self, runner, profile):
        """Test deleting an extension."""
        with respx.mock(base_url=BASE_URL) as router:
            route = router.delete("/extensions/PJFWPEP").mock(return_value=httpx.Response(204))
            result = runner.invoke(cli, ["--profile", profile, "delete", "PJFWPEP"])

        assert result.exit_code == 0, result.output
        assert route.call_count == 1
        assert "Deleted extension PJFWPEP" in result.output

    def test_api_error(self, runner, profile):
        """Test that API errors are reported with their status."""
        with respx.mock(base_url=BASE_URL) as router:
            router.get("/extensions/MISSING").mock(
                return_value=httpx.Response(404, json={"error": {"message": "Not Found", "code": 2100}})
            )
            result = runner.invoke(cli, ["--profile", profile, "get", "MISSING"])

        assert result.exit_code == 1
        assert "404" in result.output
        assert "Not Found" in result.output

    def test_connection_error(self, runner, profile):
        """Test that connection failures are reported."""
        with respx.mock(base_url=BASE_URL) as router:
            router.get("/extensions/PJFWPEP").mock(side_effect=httpx.ConnectError("refused"))
            result = runner.invoke(cli, ["--profile", profile, "get", "PJFWPEP"])

        assert result.exit_code == 1
        assert BASE_URL in result.output

    def test_malformed_extension_file(self, runner, profile, tmp_path):
        """Test that an invalid extension file is reported without a request."""
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.safe_dump({"name": "Webhook", "extension_objects": "not-a-list"}))

        with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
            route = router.post("/extensions")
            result = runner.invoke(cli, ["--profile", profile, "create", str(path)])

        assert result.exit_code == 2
        assert "not a valid extension" in result.output
        assert not route.called

    def test_invalid_yaml_file(self, runner, profile, tmp_path):
        """Test that unparsable files are reported as bad parameters."""
        path = tmp_path / "bad.yaml"
        path.write_text("name: [unclosed\n")

        result = runner.invoke(cli, ["--profile", profile, "create", str(path)])

        assert result.exit_code == 2
        assert "not valid YAML/JSON" in result.output

    def test_invalid_id(self, runner, profile):
        """Test that an id the client rejects is reported in the error format."""
        result = runner.invoke(cli, ["--profile", profile, "delete", "/"])

        assert result.exit_code == 1
        assert "[error]" in result.output
        assert "Invalid extension id" in result.output

    def test_env_config(self, runner, monkeypatch):
        """Test that PAGERDUTY_* variables are used without a profile."""
        monkeypatch.delenv("PAGERDUTY_PROFILE", raising=False)
        monkeypatch.setenv("PAGERDUTY_API_TOKEN", "env-key")
        monkeypatch.setenv("PAGERDUTY_API_URL", BASE_URL)

        with respx.mock(base_url=BASE_URL) as router:
            route = router.delete("/extensions/PJFWPEP").mock(return_value=httpx.Response(204))
            result = runner.invoke(cli, ["delete", "PJFWPEP"])

        assert result.exit_code == 0, result.output
        assert route.calls.last.request.headers["Authorization"] == "Token token=env-key"
