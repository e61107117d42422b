"""Integration tests for the installer CLI"""

import pytest
from click.testing import CliRunner

from proxymcp_installer import __version__
from proxymcp_installer.cli import main as cli_main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "installer.yaml"
    path.write_text(f"install_dir: {tmp_path / 'opt' / 'ProxyMcp'}\n")
    return path


@pytest.fixture
def cli_shell(monkeypatch, fake_shell):
    monkeypatch.setattr(cli_main, "Shell", lambda **kwargs: fake_shell)
    return fake_shell


@pytest.fixture
def registrations(monkeypatch):
    calls = []

    def fake_register(params, timeout=30.0, transport=None):
        calls.append(params)
        return {"status": "connected"}

    monkeypatch.setattr("proxymcp_installer.installer.bootstrap.register_backend", fake_register)
    return calls


class TestCLICommands:
    """Test CLI commands"""

    def test_version(self, runner):
        result = runner.invoke(cli_main.cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_parameters(self, runner):
        result = runner.invoke(cli_main.cli, ["--help"])
        assert result.exit_code == 0
        assert "--api-key" in result.output
        assert "--non-interactive" in result.output

    def test_missing_arguments(self, runner, cli_shell, config_file, registrations):
        result = runner.invoke(cli_main.cli, ["--config", str(config_file), "--callback-url=https://x/y"])

        assert result.exit_code == 1
        assert "--api-key and --callback-url are required" in result.output
        assert cli_shell.commands == []
        assert registrations == []

    def test_full_run_ignores_unknown_tokens(self, runner, cli_shell, config_file, registrations, tmp_path):
        result = runner.invoke(
            cli_main.cli,
            [
                "--config", str(config_file),
                "--api-key=ABC",
                "--unknown-flag=1",
                "--callback-url=https://x/y",
                "stray",
                "--non-interactive",
            ],
        )

        assert result.exit_code == 0, result.output
        assert len(registrations) == 1
        assert registrations[0].api_key == "ABC"
        assert registrations[0].callback_url == "https://x/y"
        assert cli_shell.interactive_commands == []
        assert (tmp_path / "opt" / "ProxyMcp" / ".env").exists()
        assert "Proxy MCP installed successfully" in result.output

    def test_bad_config_file(self, runner, cli_shell, tmp_path):
        path = tmp_path / "installer.yaml"
        path.write_text("min_runtime: 3.10\n")

        result = runner.invoke(cli_main.cli, ["--config", str(path), "--api-key=ABC", "--callback-url=https://x/y"])

        assert result.exit_code == 1
        assert "Could not load configuration" in result.output
        assert cli_shell.commands == []
