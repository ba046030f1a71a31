"""Asynchronous preparation of billboard facts and QR codes."""

from .batch import prepare_batch, prepare_billboard
from .qr import qr_payload_url, render_qr_data_url, render_qr_png
from .sources import FactsSource, HttpFactsSource, JsonFactsSource, facts_from_record
from .transport import RateLimitedAsyncTransport

__all__ = [
    "prepare_batch",
    "prepare_billboard",
    "qr_payload_url",
    "render_qr_data_url",
    "render_qr_png",
    "FactsSource",
    "HttpFactsSource",
    "JsonFactsSource",
    "facts_from_record",
    "RateLimitedAsyncTransport",
]
