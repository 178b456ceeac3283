"""Tests for sitemapd.cli — ``sitemapd run`` and ``sitemapd check``."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from sitemapd.app import SitemapApp
from sitemapd.cli import main
from sitemapd.strategies import RedirectToRoot, ShowErrorMessage


class TestSitemapdRun:
    @patch("sitemapd.server.runtime.run_server")
    def test_defaults(self, mock_server: MagicMock) -> None:
        """run uses builder and AppConfig defaults when flags are omitted."""
        main(["run"])
        mock_server.assert_called_once()
        app, host, port = mock_server.call_args[0]
        assert isinstance(app, SitemapApp)
        assert host == "127.0.0.1"
        assert port == 8080
        assert app.sitemap.static_file == Path("sitemaps.xml")
        assert app.sitemap.virtual_path.url == "/sitemaps.xml"
        assert isinstance(app.sitemap.not_found_strategy, ShowErrorMessage)

    @patch("sitemapd.server.runtime.run_server")
    def test_sitemap_flags(self, mock_server: MagicMock) -> None:
        main(
            [
                "run",
                "--file",
                "./public/sitemaps.xml",
                "--web-directory",
                ".well-known",
                "--web-filename",
                "map.xml",
                "--not-found",
                "redirect",
            ]
        )
        app = mock_server.call_args[0][0]
        assert app.sitemap.static_file == Path("public/sitemaps.xml")
        assert app.sitemap.virtual_path.url == "/.well-known/map.xml"
        assert isinstance(app.sitemap.not_found_strategy, RedirectToRoot)

    @patch("sitemapd.server.runtime.run_server")
    def test_server_flags(self, mock_server: MagicMock) -> None:
        main(["run", "--host", "0.0.0.0", "--port", "3000", "--workers", "0", "--debug"])
        app, host, port = mock_server.call_args[0]
        kwargs = mock_server.call_args[1]
        assert (host, port) == ("0.0.0.0", 3000)
        assert kwargs["workers"] == 0
        assert kwargs["reload"] is True
        assert app.config.debug is True

    @patch("sitemapd.server.runtime.run_server")
    def test_port_zero_is_kept(self, mock_server: MagicMock) -> None:
        main(["run", "--port", "0"])
        _, _, port = mock_server.call_args[0]
        assert port == 0

    @patch("sitemapd.server.runtime.run_server")
    def test_validate_missing_file_exits_one(
        self, mock_server: MagicMock, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "--file", str(tmp_path / "missing.xml"), "--validate"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
        mock_server.assert_not_called()

    @patch("sitemapd.server.runtime.run_server")
    def test_validate_existing_file_starts(
        self, mock_server: MagicMock, sitemap_file: Path
    ) -> None:
        main(["run", "--file", str(sitemap_file), "--validate"])
        app = mock_server.call_args[0][0]
        assert app.config.validate_on_startup is True

    def test_unknown_strategy_rejected(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "--not-found", "teapot"])
        assert exc_info.value.code == 2


class TestSitemapdCheck:
    def test_valid(self, sitemap_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["check", "--file", str(sitemap_file), "--web-directory", ".well-known"])
        out = capsys.readouterr().out
        assert out.startswith("OK:")
        assert "/.well-known/sitemaps.xml" in out
        assert "ShowErrorMessage" in out
        assert "Route: GET, HEAD /{requested_path:path}" in out

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "--file", str(tmp_path / "missing.xml")])
        assert exc_info.value.code == 1
        assert "does not exist" in capsys.readouterr().err


class TestNoCommand:
    def test_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "sitemapd" in capsys.readouterr().out
