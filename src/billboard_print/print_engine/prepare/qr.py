"""QR code payloads and images for printed pages."""

from __future__ import annotations

import base64
import io
import logging
from urllib.parse import quote

import qrcode
from PIL import Image

from billboard_print.print_engine.layout.config import EngineConfig
from billboard_print.print_engine.layout.facts import BillboardPrintFacts

logger = logging.getLogger(__name__)

QR_SIZE_PX = 260
QR_BORDER_MODULES = 1
GOOGLE_MAPS_QUERY = "https://www.google.com/maps?q="


def qr_payload_url(
    facts: BillboardPrintFacts, config: EngineConfig | None = None
) -> str:
    """Return the URL a billboard's QR code points at.

    The explicit map link wins, then a Google Maps query built from the GPS
    coordinates, then a page derived from the billboard id.
    """
    if facts.gps_link:
        return facts.gps_link
    if facts.gps_coordinates:
        return GOOGLE_MAPS_QUERY + quote(facts.gps_coordinates.strip(), safe="")
    config = config or EngineConfig()
    logger.debug("Billboard %s has no GPS data, using fallback QR URL", facts.id)
    return f"{config.qr_fallback_base_url.rstrip('/')}/billboard/{facts.id}"


def render_qr_png(data: str, *, size_px: int = QR_SIZE_PX) -> bytes:
    """Render ``data`` as a square PNG QR code of ``size_px`` pixels."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=QR_BORDER_MODULES,
    )
    qr.add_data(data)
    qr.make(fit=True)

    image = qr.make_image(fill_color="black", back_color="white").convert("RGB")
    image = image.resize((size_px, size_px), resample=Image.Resampling.NEAREST)

    out = io.BytesIO()
    image.save(out, format="PNG")
    return out.getvalue()


def render_qr_data_url(data: str, *, size_px: int = QR_SIZE_PX) -> str:
    """Render ``data`` as a QR code embedded in a ``data:`` URL."""
    encoded = base64.b64encode(render_qr_png(data, size_px=size_px)).decode("ascii")
    return f"data:image/png;base64,{encoded}"
