"""CLI unit tests for the CMB CLI."""

import json
from pathlib import Path
from typing import Generator, List
from unittest.mock import MagicMock, patch

import pytest
import yaml
from click.testing import CliRunner
from conftest import BASE, ENDPOINT, FakeRegistry, embedding, llm, rerank

from custom_model_browser.cli import app
from custom_model_browser.cli.utils.helpers import ExitCode, resolve_log_level
from custom_model_browser.preferences import PreferenceStore


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI runner for testing."""
    return CliRunner()


@pytest.fixture(autouse=True)
def no_log_handlers() -> Generator[MagicMock, None, None]:
    """Keep the CLI from attaching stream handlers to captured streams."""
    with patch("custom_model_browser.cli.app.configure_logging") as mock:
        yield mock


@pytest.fixture
def populated(fake_registry: FakeRegistry) -> FakeRegistry:
    fake_registry.add("LLM", {"model_name": "my-llama", "is_builtin": False}, llm("my-llama"))
    fake_registry.add("LLM", {"model_name": "llama-2", "is_builtin": True})
    fake_registry.add("embedding", {"model_name": "my-bge", "is_builtin": False}, embedding("my-bge"))
    fake_registry.add("rerank", {"model_name": "my-reranker", "is_builtin": False}, rerank("my-reranker"))
    return fake_registry


def invoke(cli_runner: CliRunner, *args: str):
    return cli_runner.invoke(app, ["--endpoint", ENDPOINT, *args])


def card_names(payload: dict, route: str) -> List[str]:
    for tab in payload["tabs"]:
        if tab["route"] == route:
            return [card["model_name"] for card in tab["cards"]]
    raise AssertionError(f"tab {route} missing")


class TestModelsList:
    """Tests for `cmb models list`."""

    def test_lists_last_active_tab(self, cli_runner: CliRunner, populated: FakeRegistry) -> None:
        result = invoke(cli_runner, "--format", "json", "models", "list")

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["active_tab"] == "/launch_model/custom/llm"
        assert card_names(payload, "/launch_model/custom/llm") == ["my-llama"]
        assert payload["count"] == 1

    def test_tab_option_selects_and_remembers(
        self, cli_runner: CliRunner, populated: FakeRegistry, preferences_path: Path
    ) -> None:
        result = invoke(cli_runner, "--format", "json", "models", "list", "--tab", "embedding")

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert card_names(payload, "/launch_model/custom/embedding") == ["my-bge"]
        assert PreferenceStore(str(preferences_path)).get("sub_type") == "/launch_model/custom/embedding"

    def test_all_tabs(self, cli_runner: CliRunner, populated: FakeRegistry) -> None:
        result = invoke(cli_runner, "--format", "json", "models", "list", "--tab", "all")

        payload = json.loads(result.output)
        assert [tab["route"] for tab in payload["tabs"]] == [
            "/launch_model/custom/llm",
            "/launch_model/custom/embedding",
            "/launch_model/custom/rerank",
        ]
        assert payload["count"] == 3

    def test_search_filters_cards(self, cli_runner: CliRunner, populated: FakeRegistry) -> None:
        result = invoke(cli_runner, "--format", "json", "models", "list", "--tab", "all", "--search", "BGE")

        payload = json.loads(result.output)
        assert payload["count"] == 1
        assert card_names(payload, "/launch_model/custom/embedding") == ["my-bge"]

    def test_gpu_flag_on_llm_cards(self, cli_runner: CliRunner, populated: FakeRegistry) -> None:
        result = invoke(cli_runner, "--format", "json", "models", "list", "--gpu")

        card = json.loads(result.output)["tabs"][0]["cards"][0]
        assert card["gpu_available"] is True
        assert card["is_custom"] is True
        assert card["model_type"] == "LLM"
        assert card["endpoint"] == ENDPOINT

    def test_yaml_output(self, cli_runner: CliRunner, populated: FakeRegistry) -> None:
        result = invoke(cli_runner, "--format", "yaml", "models", "list", "--tab", "rerank")

        assert result.exit_code == 0, result.output
        payload = yaml.safe_load(result.output)
        assert payload["tabs"][0]["cards"][0]["model_name"] == "my-reranker"

    def test_table_output(self, cli_runner: CliRunner, populated: FakeRegistry) -> None:
        result = invoke(cli_runner, "--format", "table", "--no-color", "models", "list", "--tab", "all")

        assert result.exit_code == 0, result.output
        assert "Language Models" in result.output
        assert "my-llama" in result.output
        assert "my-bge" in result.output
        assert "llama-2" not in result.output

    def test_backend_failure_exit_code(self, cli_runner: CliRunner, fake_registry: FakeRegistry) -> None:
        fake_registry.respond(f"{BASE}/embedding", 502)

        result = invoke(cli_runner, "--format", "json", "models", "list")

        assert result.exit_code == ExitCode.AGGREGATION_FAILED
        assert "HTTP error 502" in result.output

    def test_invalid_tab(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "models", "list", "--tab", "image")

        assert result.exit_code == ExitCode.INVALID_USAGE


class TestModelsGet:
    """Tests for `cmb models get`."""

    def test_get_descriptor_json(self, cli_runner: CliRunner, populated: FakeRegistry) -> None:
        result = invoke(cli_runner, "--format", "json", "models", "get", "embedding", "my-bge")

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["dimensions"] == 768
        assert populated.calls == [f"{BASE}/embedding/my-bge"]

    def test_get_descriptor_table(self, cli_runner: CliRunner, populated: FakeRegistry) -> None:
        result = invoke(cli_runner, "--format", "table", "--no-color", "models", "get", "rerank", "my-reranker")

        assert result.exit_code == 0, result.output
        assert "model_type" in result.output

    def test_get_missing_model(self, cli_runner: CliRunner, fake_registry: FakeRegistry) -> None:
        result = invoke(cli_runner, "models", "get", "LLM", "ghost")

        assert result.exit_code == ExitCode.MODEL_NOT_FOUND
        assert "ghost" in result.output

    def test_get_backend_error(self, cli_runner: CliRunner, fake_registry: FakeRegistry) -> None:
        fake_registry.respond(f"{BASE}/LLM/broken", 200, text="not json")

        result = invoke(cli_runner, "models", "get", "llm", "broken")

        assert result.exit_code == ExitCode.BACKEND_ERROR

    def test_get_unknown_category(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "models", "get", "image", "sd")

        assert result.exit_code == ExitCode.INVALID_USAGE


class TestTabs:
    """Tests for `cmb tabs`."""

    def test_current_defaults_to_llm(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "--format", "json", "tabs", "current")

        payload = json.loads(result.output)
        assert payload["active_tab"] == "/launch_model/custom/llm"
        assert payload["source"] == "Default"

    def test_select_then_current(self, cli_runner: CliRunner) -> None:
        selected = invoke(cli_runner, "tabs", "select", "Rerank")
        assert selected.exit_code == 0
        assert selected.output.strip() == "/launch_model/custom/rerank"

        result = invoke(cli_runner, "--format", "json", "tabs", "current")
        payload = json.loads(result.output)
        assert payload["active_tab"] == "/launch_model/custom/rerank"
        assert payload["source"].startswith("Preference")

    def test_select_accepts_route(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "tabs", "select", "/launch_model/custom/embedding")

        assert result.exit_code == 0

    def test_select_rejects_unknown(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "tabs", "select", "audio")

        assert result.exit_code == ExitCode.INVALID_USAGE

    def test_current_table(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "--format", "table", "--no-color", "tabs", "current")

        assert "Language Models" in result.output


class TestGlobalOptions:
    """Tests for root-level options."""

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "CMB version" in result.output

    def test_invalid_env_config(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CMB_TIMEOUT", "never")

        result = cli_runner.invoke(app, ["tabs", "current"])

        assert result.exit_code == ExitCode.INVALID_USAGE
        assert "CMB_TIMEOUT" in result.output

    def test_env_command(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "--format", "json", "env")

        payload = json.loads(result.output)
        assert payload["endpoint"] == ENDPOINT
        assert "CMB_PREFERENCES_PATH" in payload["environment_variables"]

    def test_verbosity_sets_log_level(self, cli_runner: CliRunner, no_log_handlers: MagicMock) -> None:
        invoke(cli_runner, "-vv", "--format", "json", "tabs", "current")

        no_log_handlers.assert_called_once_with("DEBUG")

    @pytest.mark.parametrize(
        "verbose,quiet,debug,expected",
        [(0, 0, False, "WARNING"), (1, 0, False, "INFO"), (2, 0, False, "DEBUG"), (0, 1, False, "ERROR"), (0, 0, True, "DEBUG")],
    )
    def test_resolve_log_level(self, verbose: int, quiet: int, debug: bool, expected: str) -> None:
        assert resolve_log_level(verbose, quiet, debug) == expected
