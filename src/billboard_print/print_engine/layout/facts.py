"""Read-only billboard facts consumed by the print engine.

Facts are projections of billboard, contract and installation-task records.
Field aliases match the column names of the upstream records so a fetched row
validates directly.
"""

from __future__ import annotations

import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from billboard_print.print_engine.layout.modes import PreviewStatus


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ContractInfo(BaseModel):
    """Contract metadata printed on every page of a batch."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    contract_number: int | None = Field(default=None, alias="Contract_Number")
    customer_name: str | None = Field(default=None, alias="Customer Name")
    ad_type: str | None = Field(default=None, alias="Ad Type")
    contract_date: datetime.date | None = Field(default=None, alias="Contract Date")

    @field_validator("*", mode="before")
    @classmethod
    def _blank_strings_to_none(cls, value: Any) -> Any:
        return _blank_to_none(value)


class BillboardPrintFacts(BaseModel):
    """Everything the engine needs to know about one billboard for one render."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int = Field(alias="ID")
    name: str | None = Field(default=None, alias="Billboard_Name")
    size: str | None = Field(default=None, alias="Size")
    level: str | None = Field(default=None, alias="Level")
    faces_count: int | None = Field(default=None, alias="Faces_Count")
    municipality: str | None = Field(default=None, alias="Municipality")
    district: str | None = Field(default=None, alias="District")
    nearest_landmark: str | None = Field(default=None, alias="Nearest_Landmark")

    image_url: str | None = Field(default=None, alias="Image_URL")
    gps_coordinates: str | None = Field(default=None, alias="GPS_Coordinates")
    gps_link: str | None = Field(default=None, alias="GPS_Link")

    has_cutout: bool = False
    cutout_image_url: str | None = None
    design_face_a: str | None = None
    design_face_b: str | None = None
    installed_image_url: str | None = None
    """Installation photo of a single-face installation."""
    installed_image_face_a_url: str | None = None
    installed_image_face_b_url: str | None = None

    installation_date: datetime.date | None = None
    team_name: str | None = None
    contract: ContractInfo | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_strings_to_none(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("installation_date", mode="before")
    @classmethod
    def _date_from_timestamp(cls, value: Any) -> Any:
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, str) and ("T" in value or " " in value.strip()):
            return datetime.datetime.fromisoformat(value.strip()).date()
        return value

    @field_validator("has_cutout", mode="before")
    @classmethod
    def _null_cutout(cls, value: Any) -> Any:
        return False if value is None else value

    @classmethod
    def identity_only(cls, billboard_id: int) -> BillboardPrintFacts:
        """Facts for a billboard whose record could not be fetched."""
        return cls(id=billboard_id)

    @property
    def faces(self) -> int:
        """Faces count, defaulting to 1 when unset."""
        return self.faces_count or 1

    @property
    def has_two_faces(self) -> bool:
        return self.faces >= 2

    @property
    def has_design_a(self) -> bool:
        return self.design_face_a is not None

    @property
    def has_design_b(self) -> bool:
        return self.design_face_b is not None

    @property
    def design_count(self) -> int:
        return int(self.has_design_a) + int(self.has_design_b)

    @property
    def install_a_url(self) -> str | None:
        """Face A installation photo, falling back to the single-face photo."""
        return self.installed_image_face_a_url or self.installed_image_url

    @property
    def install_b_url(self) -> str | None:
        return self.installed_image_face_b_url

    @property
    def installation_photo_count(self) -> int:
        return int(self.install_a_url is not None) + int(self.install_b_url is not None)

    @property
    def has_cutout_image(self) -> bool:
        return self.has_cutout or self.cutout_image_url is not None


class PreparedBillboard(BaseModel):
    """Facts of one billboard joined with its generated QR image."""

    model_config = ConfigDict(frozen=True)

    facts: BillboardPrintFacts
    qr_url: str | None = None


def simulate_status(
    facts: BillboardPrintFacts, status: PreviewStatus, placeholder_url: str
) -> BillboardPrintFacts:
    """Return a copy of ``facts`` that exhibits ``status`` for the live preview.

    The source facts are never modified.
    """
    if status == PreviewStatus.NO_DESIGN:
        update = {
            "design_face_a": None,
            "design_face_b": None,
            "installed_image_url": None,
            "installed_image_face_a_url": None,
            "installed_image_face_b_url": None,
        }
    elif status == PreviewStatus.ONE_DESIGN:
        update = {
            "faces_count": max(facts.faces, 2),
            "design_face_a": facts.design_face_a or placeholder_url,
            "design_face_b": None,
            "installed_image_face_a_url": None,
            "installed_image_face_b_url": None,
        }
    elif status == PreviewStatus.ONE_INSTALL:
        update = {
            "faces_count": max(facts.faces, 2),
            "design_face_a": facts.design_face_a or placeholder_url,
            "design_face_b": facts.design_face_b or placeholder_url,
            "installed_image_face_a_url": facts.install_a_url or placeholder_url,
            "installed_image_face_b_url": None,
        }
    else:
        return facts
    return facts.model_copy(update=update)
