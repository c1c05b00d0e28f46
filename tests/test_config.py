"""Tests for perch.config — DiscoveryConfig frozen dataclass."""

from pathlib import Path

import pytest

from perch.config import DiscoveryConfig


class TestDiscoveryConfig:
    def test_defaults(self) -> None:
        cfg = DiscoveryConfig()

        assert cfg.app_dir == "app"
        assert cfg.page_file == "page.py"
        assert cfg.route_file == "route.py"
        assert cfg.layout_file == "layout.py"
        assert cfg.default_file == "default.py"

    def test_override(self) -> None:
        cfg = DiscoveryConfig(app_dir="src/app", page_file="index.py")

        assert cfg.app_dir == "src/app"
        assert cfg.page_file == "index.py"

    def test_frozen(self) -> None:
        cfg = DiscoveryConfig()

        with pytest.raises(AttributeError):
            cfg.app_dir = "elsewhere"  # type: ignore[misc]

    def test_app_dir_as_path(self) -> None:
        cfg = DiscoveryConfig(app_dir=Path("/srv/app"))
        assert cfg.app_dir == Path("/srv/app")
