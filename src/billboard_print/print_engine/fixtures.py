"""Shared test data: image URLs and a billboard record builder."""

from __future__ import annotations

from typing import Any

DESIGN_A = "https://cdn.example.com/design-a.jpg"
DESIGN_B = "https://cdn.example.com/design-b.jpg"
INSTALL_A = "https://cdn.example.com/install-a.jpg"
INSTALL_B = "https://cdn.example.com/install-b.jpg"
PHOTO = "https://cdn.example.com/billboard.jpg"


def billboard_record(**overrides: Any) -> dict[str, Any]:
    """A billboard record shaped like the upstream rows."""
    record: dict[str, Any] = {
        "ID": 101,
        "Billboard_Name": "North Gate 1",
        "Size": "12x4",
        "Level": "A",
        "Faces_Count": 2,
        "Municipality": "Tripoli",
        "District": "Souq",
        "Nearest_Landmark": "Central station",
        "Image_URL": PHOTO,
        "GPS_Coordinates": "32.8872,13.1913",
        "contract": {
            "Contract_Number": 1207,
            "Customer Name": "Acme",
            "Ad Type": "Beverages",
        },
    }
    record.update(overrides)
    return record
