"""Tests for QR payloads and images."""

import base64
import io

from PIL import Image

from billboard_print.print_engine.layout.config import EngineConfig
from billboard_print.print_engine.prepare.qr import (
    qr_payload_url,
    render_qr_data_url,
    render_qr_png,
)


class TestQrPayloadUrl:
    """Tests for qr_payload_url."""

    def test_map_link_wins(self, make_facts) -> None:
        facts = make_facts(GPS_Link="https://maps.example.com/p/1")
        assert qr_payload_url(facts) == "https://maps.example.com/p/1"

    def test_coordinates(self, make_facts) -> None:
        facts = make_facts(GPS_Coordinates=" 32.8872,13.1913 ")
        assert qr_payload_url(facts) == (
            "https://www.google.com/maps?q=32.8872%2C13.1913"
        )

    def test_fallback_page(self, make_facts) -> None:
        facts = make_facts(GPS_Coordinates=None)
        config = EngineConfig(qr_fallback_base_url="https://billboards.example.com/")
        assert qr_payload_url(facts, config) == (
            "https://billboards.example.com/billboard/101"
        )


class TestRenderQr:
    """Tests for QR image rendering."""

    def test_png_size(self) -> None:
        png = render_qr_png("https://example.com/billboard/1", size_px=120)
        with Image.open(io.BytesIO(png)) as image:
            assert image.format == "PNG"
            assert image.size == (120, 120)

    def test_data_url(self) -> None:
        url = render_qr_data_url("hello")
        prefix = "data:image/png;base64,"
        assert url.startswith(prefix)
        assert base64.b64decode(url[len(prefix) :]).startswith(b"\x89PNG")
