"""CLI tests using typer's CliRunner."""

from unittest.mock import Mock, patch

import pytest
from typer.testing import CliRunner

from docui import __version__
from docui.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_log_files(monkeypatch):
    monkeypatch.setattr("docui.main.setup_tui_logging", Mock())
    monkeypatch.setattr("docui.main.get_layout", lambda: {"list_width_pct": 50})


class TestCLIBasics:
    def test_cli_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Usage:" in result.stdout
        assert "keybindings" in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"docui version {__version__}" in result.stdout

    def test_invalid_command(self):
        result = runner.invoke(app, ["nonexistent-command"])
        assert result.exit_code != 0


class TestRun:
    def test_missing_binary_exits_1(self):
        result = runner.invoke(app, ["run", "--docker-bin", "/definitely/not/docker"])
        assert result.exit_code == 1

    @patch("docui.ui.app.run_app")
    @patch("docui.main.shutil.which", return_value="/usr/bin/podman")
    def test_run_starts_app_with_binary(self, mock_which, mock_run_app):
        result = runner.invoke(app, ["run", "--docker-bin", "podman", "--verbose"])

        assert result.exit_code == 0
        client = mock_run_app.call_args[0][0]
        assert client.binary == "podman"
        mock_which.assert_called_once_with("podman")

    @patch("docui.ui.app.run_app")
    @patch("docui.main.shutil.which", return_value="/usr/bin/docker")
    def test_no_subcommand_runs_dashboard(self, mock_which, mock_run_app, monkeypatch):
        monkeypatch.setattr("docui.main.get_docker_binary", lambda: "docker")
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        mock_run_app.assert_called_once()

    @patch("docui.main.shutil.which", return_value="/usr/bin/docker")
    def test_startup_error_exits_1(self, mock_which):
        from docui.exceptions import DuplicateIdentifierError

        with patch("docui.ui.app.run_app", side_effect=DuplicateIdentifierError("images")):
            result = runner.invoke(app, ["run", "--docker-bin", "docker"])
        assert result.exit_code == 1


class TestKeybindingsCommand:
    def test_lists_bindings(self, tmp_path):
        result = runner.invoke(app, ["keybindings", "--config", str(tmp_path / "none.yaml")])
        assert result.exit_code == 0
        assert "remove_image" in result.stdout
        assert "next_panel" in result.stdout

    def test_single_panel(self, tmp_path):
        result = runner.invoke(app, ["keybindings", "--panel", "networks", "--config", str(tmp_path / "none.yaml")])
        assert result.exit_code == 0
        assert "remove_network" in result.stdout
        assert "remove_image" not in result.stdout

    def test_unknown_panel(self, tmp_path):
        result = runner.invoke(app, ["keybindings", "--panel", "ships", "--config", str(tmp_path / "none.yaml")])
        assert result.exit_code == 1

    def test_init_writes_example(self, tmp_path):
        path = tmp_path / "keybindings.yaml"
        result = runner.invoke(app, ["keybindings", "--init", "--config", str(path)])
        assert result.exit_code == 0
        assert path.exists()
        assert "overrides: []" in path.read_text()

    def test_overrides_are_reflected(self, tmp_path):
        path = tmp_path / "keybindings.yaml"
        path.write_text("overrides:\n  - {key: x, action: remove_network, panel: networks, replace: d}\n")
        result = runner.invoke(app, ["keybindings", "--panel", "networks", "--config", str(path)])
        assert result.exit_code == 0
        lines = [line for line in result.stdout.splitlines() if "remove_network" in line]
        assert len(lines) == 1
        assert " x " in lines[0]
