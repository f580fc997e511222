import io
from pathlib import Path
from typing import Iterable, Optional, Tuple

import pytest
from PIL import Image

Coords = Iterable[Tuple[str, str]]


def make_profile_xml(normal: Optional[Coords] = None, ghost: Optional[Coords] = None,
                     vendor: Optional[Coords] = None) -> str:
    """Build a profile document; a category of None is left out entirely."""
    sections = []
    for tag, coords in (("Normal", normal), ("Ghost", ghost), ("Vendor", vendor)):
        if coords is None:
            continue
        children = "".join(f'<Waypoint X="{x}" Y="{y}" />' for x, y in coords)
        sections.append(f"<{tag}>{children}</{tag}>")
    return f"<Grind><Waypoints>{''.join(sections)}</Waypoints></Grind>"


@pytest.fixture
def write_profile(tmp_path):
    def _write(name="route.xml", **categories) -> Path:
        path = tmp_path / name
        path.write_text(make_profile_xml(**categories), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (400, 400), (128, 128, 128)).save(buffer, format="PNG")
    return buffer.getvalue()
