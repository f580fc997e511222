import json

import pytest
from typer.testing import CliRunner

from squiremap.cli import app
from squiremap.image_fetcher import ImageFetcher

runner = CliRunner()


@pytest.fixture
def zones_file(tmp_path):
    path = tmp_path / "zones.json"
    path.write_text(json.dumps({"Westfall": "https://maps.example/westfall.png", "Durotar": ""}),
                    encoding="utf-8")
    return path


def test_addon_prints_way_lines(write_profile):
    profile = write_profile(normal=[("1000", "2000"), ("1100", "2100")], ghost=[("1", "1")])

    result = runner.invoke(app, ["addon", str(profile)])

    assert result.exit_code == 0
    assert result.output == "/way 1000 2000\n/way 1100 2100\n"


def test_info(write_profile):
    profile = write_profile(normal=[("1000", "2000"), ("1100", "2100")], vendor=[("900", "900")])

    result = runner.invoke(app, ["info", str(profile)])

    assert result.exit_code == 0
    assert "Normal waypoints: 2" in result.output
    assert "Ghost waypoints: 0" in result.output
    assert "Vendor waypoints: 1" in result.output
    assert "Start point: 1100 2100" in result.output


def test_info_aborts_without_waypoints(write_profile):
    result = runner.invoke(app, ["info", str(write_profile())])

    assert result.exit_code == 1


def test_zones_lists_names(zones_file):
    result = runner.invoke(app, ["zones", "--zones-file", str(zones_file)])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["Durotar (no image)", "Westfall"]


def test_draw_with_zone(monkeypatch, write_profile, zones_file, tmp_path, png_bytes):
    urls = []

    def fake_fetch(self, url):
        urls.append(url)
        return png_bytes

    monkeypatch.setattr(ImageFetcher, "fetch", fake_fetch)
    profile = write_profile(normal=[("5000", "5000")])
    addon_file = tmp_path / "addon.txt"

    result = runner.invoke(app, [
        "draw", str(profile), "--zone", "Westfall", "--zones-file", str(zones_file),
        "--output-dir", str(tmp_path / "maps"), "--addon-file", str(addon_file),
    ])

    assert result.exit_code == 0
    assert urls == ["https://maps.example/westfall.png"]
    assert (tmp_path / "maps" / "route.jpg").exists()
    assert addon_file.read_text(encoding="utf-8") == "/way 5000 5000\n"


def test_draw_aborts_for_zone_without_image(monkeypatch, write_profile, zones_file, tmp_path):
    monkeypatch.setattr(ImageFetcher, "fetch", lambda self, url: pytest.fail("should not download"))
    profile = write_profile(normal=[("5000", "5000")])

    result = runner.invoke(app, [
        "draw", str(profile), "--zone", "Durotar", "--zones-file", str(zones_file),
        "--output-dir", str(tmp_path),
    ])

    assert result.exit_code == 1
    assert not (tmp_path / "route.jpg").exists()


def test_draw_requires_zone_or_url(write_profile):
    result = runner.invoke(app, ["draw", str(write_profile(normal=[("1", "1")]))])

    assert result.exit_code == 2


def test_draw_rejects_zero_padding(write_profile):
    profile = write_profile(normal=[("5000", "5000")])

    result = runner.invoke(app, ["draw", str(profile), "--url", "https://maps.example/w.png", "--padding", "0"])

    assert result.exit_code == 2
