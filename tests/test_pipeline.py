import pytest
from PIL import Image

from squiremap.errors import MissingBackground, MissingStartPoint, NoWaypoints
from squiremap.models import RenderConfig
from squiremap.pipeline import MapDrawer
from squiremap.zones import ZoneCatalog

ZONE_URL = "https://maps.example/westfall.png"


class StubFetcher:
    def __init__(self, data):
        self.data = data
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        return self.data


@pytest.fixture
def fetcher(png_bytes):
    return StubFetcher(png_bytes)


@pytest.fixture
def drawer(fetcher, tmp_path):
    catalog = ZoneCatalog({"Westfall": ZONE_URL, "Deeprun Tram": ""})
    return MapDrawer(catalog=catalog, fetch_image=fetcher, output_dir=tmp_path / "out")


@pytest.fixture(autouse=True)
def output_dir(tmp_path):
    (tmp_path / "out").mkdir()


def test_draw_writes_profile_named_jpeg(drawer, fetcher, write_profile, tmp_path):
    profile = write_profile("westfall 10-12.xml", normal=[("2500", "2500"), ("5000", "5000")],
                            ghost=[("3000", "3000")])

    output = drawer.draw(profile, zone="Westfall")

    assert output == tmp_path / "out" / "westfall 10-12.jpg"
    assert fetcher.urls == [ZONE_URL]
    with Image.open(output) as image:
        assert image.format == "JPEG"
        assert image.width == 180
        assert image.height > 180


def test_draw_collects_addon_lines(drawer, write_profile):
    profile = write_profile(normal=[("2500", "2500"), ("5000", "5000")])
    lines = []

    drawer.draw(profile, zone="Westfall", addon_sink=lines.append)

    assert lines == ["/way 2500 2500\n", "/way 5000 5000\n"]


def test_explicit_url_bypasses_catalog(drawer, fetcher, write_profile):
    profile = write_profile(normal=[("5000", "5000")])

    drawer.draw(profile, url="https://other.example/map.png")

    assert fetcher.urls == ["https://other.example/map.png"]


def test_no_waypoints_fails_before_download(drawer, fetcher, write_profile, tmp_path):
    profile = write_profile(normal=[], ghost=[], vendor=[])

    with pytest.raises(NoWaypoints):
        drawer.draw(profile, zone="Westfall")

    assert fetcher.urls == []
    assert list((tmp_path / "out").iterdir()) == []


def test_missing_start_point_writes_nothing(drawer, fetcher, write_profile, tmp_path):
    profile = write_profile(ghost=[("5000", "5000")], vendor=[("2500", "2500")])

    with pytest.raises(MissingStartPoint):
        drawer.draw(profile, zone="Westfall")

    assert fetcher.urls == []
    assert list((tmp_path / "out").iterdir()) == []


@pytest.mark.parametrize("zone", ["Teldrassil", "Deeprun Tram"])
def test_zone_without_url(drawer, fetcher, write_profile, zone):
    profile = write_profile(normal=[("5000", "5000")])

    with pytest.raises(MissingBackground):
        drawer.draw(profile, zone=zone)

    assert fetcher.urls == []


def test_empty_download(write_profile, tmp_path):
    drawer = MapDrawer(catalog=ZoneCatalog({"Westfall": ZONE_URL}), fetch_image=StubFetcher(b""),
                       output_dir=tmp_path / "out")

    with pytest.raises(MissingBackground):
        drawer.draw(write_profile(normal=[("5000", "5000")]), zone="Westfall")


def test_repeated_runs_start_fresh(drawer, write_profile):
    first = drawer.draw(write_profile("a.xml", normal=[("2500", "2500"), ("5000", "5000")]), zone="Westfall")
    second = drawer.draw(write_profile("b.xml", normal=[("5000", "5000")]), zone="Westfall")

    with Image.open(first) as a, Image.open(second) as b:
        assert a.width == 180
        assert b.width == 80


@pytest.mark.parametrize("normal", [
    [("5000", "1000")],
    [("5000", "1000"), ("5000", "9000")],
    [("1000", "5000"), ("9000", "5000")],
])
def test_minimal_padding_still_exports(fetcher, write_profile, tmp_path, normal):
    drawer = MapDrawer(catalog=ZoneCatalog({"Westfall": ZONE_URL}), fetch_image=fetcher,
                       render_config=RenderConfig(padding=0), output_dir=tmp_path / "out")

    output = drawer.draw(write_profile(normal=normal), zone="Westfall")

    with Image.open(output) as image:
        assert image.width >= 1
        assert image.height >= 1
