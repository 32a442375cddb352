"""Tests for switchyard.cli._run — ``switchyard run`` and ``switchyard serve``."""

import types
from unittest.mock import MagicMock, patch

import pytest

from switchyard.app import App
from switchyard.cli import main
from switchyard.config import AppConfig
from switchyard.errors import ConfigurationError
from switchyard.handlers.static import StaticFiles


@pytest.fixture
def fake_app(monkeypatch: pytest.MonkeyPatch) -> App:
    """Register a fake module with a switchyard App instance."""
    app = App(config=AppConfig(host="127.0.0.1", port=9000, debug=True))
    mod = types.ModuleType("_run_test_app")
    mod.app = app  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_run_test_app", mod)
    return app


class TestSwitchyardRun:
    @patch("switchyard.server.dev.run_dev_server")
    def test_default_host_and_port(self, mock_server: MagicMock, fake_app: App) -> None:
        """run uses app config defaults when --host/--port are omitted."""
        main(["run", "_run_test_app:app"])
        mock_server.assert_called_once()
        args = mock_server.call_args[0]
        assert args[0] is fake_app
        assert args[1] == "127.0.0.1"
        assert args[2] == 9000

    @patch("switchyard.server.dev.run_dev_server")
    def test_host_and_port_override(self, mock_server: MagicMock, fake_app: App) -> None:
        main(["run", "_run_test_app:app", "--host", "0.0.0.0", "--port", "3000"])
        args = mock_server.call_args[0]
        assert args[1] == "0.0.0.0"
        assert args[2] == 3000

    @patch("switchyard.server.dev.run_dev_server")
    def test_port_zero_overrides_config(self, mock_server: MagicMock, fake_app: App) -> None:
        main(["run", "_run_test_app:app", "--port", "0"])
        assert mock_server.call_args[0][2] == 0

    @patch("switchyard.server.dev.run_dev_server")
    def test_app_path_forwarded(self, mock_server: MagicMock, fake_app: App) -> None:
        """The original import string is passed as app_path for reload."""
        main(["run", "_run_test_app:app"])
        kwargs = mock_server.call_args[1]
        assert kwargs["app_path"] == "_run_test_app:app"
        assert kwargs["reload"] is True

    @patch("switchyard.server.dev.run_dev_server")
    def test_app_is_frozen_before_serving(self, mock_server: MagicMock, fake_app: App) -> None:
        main(["run", "_run_test_app:app"])
        assert fake_app.router.compiled is True

    @patch("switchyard.server.production.run_production_server")
    def test_production_flag(self, mock_server: MagicMock, fake_app: App) -> None:
        main(
            [
                "run",
                "_run_test_app:app",
                "--production",
                "--workers",
                "4",
                "--log-level",
                "warning",
            ]
        )
        kwargs = mock_server.call_args[1]
        assert kwargs["workers"] == 4
        assert kwargs["log_level"] == "warning"
        assert kwargs["port"] == 9000

    def test_module_without_colon_defaults_to_app(
        self, fake_app: App, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        with patch("switchyard.server.dev.run_dev_server") as mock_server:
            main(["run", "_run_test_app"])
        assert mock_server.call_args[0][0] is fake_app

    def test_factory_is_called(self, monkeypatch: pytest.MonkeyPatch) -> None:
        app = App(AppConfig(debug=True))
        mod = types.ModuleType("_factory_app")
        mod.create_app = lambda: app  # type: ignore[attr-defined]
        monkeypatch.setitem(__import__("sys").modules, "_factory_app", mod)

        with patch("switchyard.server.dev.run_dev_server") as mock_server:
            main(["run", "_factory_app:create_app"])
        assert mock_server.call_args[0][0] is app

    def test_invalid_import_string(self, capsys: pytest.CaptureFixture[str]) -> None:
        """run exits 1 with error message for bad import string."""
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "nonexistent_module_xyz:app"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_not_an_app(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        mod = types.ModuleType("_not_app")
        mod.app = 42  # type: ignore[attr-defined]
        monkeypatch.setitem(__import__("sys").modules, "_not_app", mod)

        with pytest.raises(SystemExit) as exc_info:
            main(["run", "_not_app:app"])
        assert exc_info.value.code == 1
        assert "not a switchyard.App" in capsys.readouterr().err

    @patch("switchyard.server.dev.run_dev_server")
    def test_missing_pounce_exits_1(
        self,
        mock_server: MagicMock,
        fake_app: App,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        mock_server.side_effect = ConfigurationError("Install it with: pip install switchyard[server]")
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "_run_test_app:app"])
        assert exc_info.value.code == 1
        assert "pip install" in capsys.readouterr().err


class TestSwitchyardServe:
    @patch("switchyard.server.production.run_production_server")
    def test_serves_directory_at_root(self, mock_server: MagicMock, tmp_path) -> None:
        main(["serve", str(tmp_path), "--port", "9001"])

        app = mock_server.call_args[0][0]
        assert isinstance(app, App)
        (route,) = app.router.routes
        assert route.pattern == "/"
        assert isinstance(route.handler, StaticFiles)
        assert route.handler.directory == tmp_path.resolve()
        assert mock_server.call_args[1]["port"] == 9001

    @patch("switchyard.server.production.run_production_server")
    def test_serves_directory_at_prefix(self, mock_server: MagicMock, tmp_path) -> None:
        main(["serve", str(tmp_path), "--prefix", "/proverbs"])

        (route,) = mock_server.call_args[0][0].router.routes
        assert route.pattern == "/proverbs/"

    def test_missing_directory_exits_1(
        self, tmp_path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["serve", str(tmp_path / "nope")])
        assert exc_info.value.code == 1
        assert "does not exist" in capsys.readouterr().err


class TestNoCommand:
    def test_prints_help_and_exits_0(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "switchyard" in capsys.readouterr().out
