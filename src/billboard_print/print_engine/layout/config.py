"""Configuration for the print engine."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PrintLabels(BaseModel):
    """Every literal string the renderer writes onto a page."""

    model_config = ConfigDict(frozen=True)

    contract_prefix: str = Field(
        default="Contract No.", description="Prefix of the contract number text."
    )
    ad_type_label: str = Field(
        default="Ad type:", description="Default label of the ad type element."
    )
    faces_prefix: str = Field(
        default="Faces:", description="Prefix of the faces count text."
    )
    cutout_prefix: str = Field(
        default="Includes cutout -",
        description="Prepended to the faces count when the billboard has a cutout.",
    )
    installed_prefix: str = Field(
        default="Installed:", description="Prefix of the installation date text."
    )
    not_installed: str = Field(
        default="Not installed yet",
        description="Written instead of a date when no installation date exists.",
    )
    team_copy: str = Field(
        default="Installation team",
        description="Print type label of team pages without a known team name.",
    )
    design_a_placeholder: str = Field(
        default="Design A", description="Preview caption of an empty design slot A."
    )
    design_b_placeholder: str = Field(
        default="Design B", description="Preview caption of an empty design slot B."
    )
    face_a_placeholder: str = Field(
        default="Face A", description="Preview caption of an empty face A slot."
    )
    face_b_placeholder: str = Field(
        default="Face B", description="Preview caption of an empty face B slot."
    )
    image_placeholder: str = Field(
        default="Image", description="Preview caption of other empty image slots."
    )
    qr_placeholder: str = Field(
        default="QR", description="Preview caption of an empty QR code slot."
    )
    badge_no_design: str = Field(default="No design")
    badge_one_design: str = Field(default="One design only")
    badge_one_install: str = Field(default="One installation photo only")
    installation_title: str = Field(
        default="Installation", description="Document title of installation batches."
    )
    removal_title: str = Field(
        default="Removal", description="Document title of removal batches."
    )
    contract_title: str = Field(default="Contract")
    billboards_title: str = Field(default="billboards")


class PrintToggles(BaseModel):
    """Per-category content visibility switches of one print run.

    The badge toggles gate the badge layer only and are independent of the
    element visibility flags stored in the mode settings.
    """

    model_config = ConfigDict(frozen=True)

    show_designs: bool = True
    show_cutouts: bool = True
    show_installation_images: bool = True
    show_status_badges: bool = True
    show_background: bool = True

    show_no_design_badge: bool = True
    show_one_design_badge: bool = True
    show_one_install_badge: bool = True


DEFAULT_SIZE_RANKS: dict[str, int] = {
    "14x4": 1,
    "12x4": 2,
    "10x4": 3,
    "9x3": 4,
    "8x4": 5,
    "8x3": 6,
    "7x4": 7,
    "7x3": 8,
    "6x4": 9,
    "6x3": 10,
    "5x4": 11,
    "5x3": 12,
    "4x3": 13,
    "4x4": 14,
    "3x4": 15,
    "3x3": 16,
    "3x2": 17,
    "2x3": 18,
    "2x2": 19,
    "2x1": 20,
    "1x1": 21,
}

DEFAULT_LEVEL_RANKS: dict[str, int] = {"A": 1, "B": 2, "C": 3, "D": 4}


class EngineConfig(BaseModel):
    """Configuration shared by every stage of the print engine."""

    model_config = ConfigDict(frozen=True)

    labels: PrintLabels = Field(default_factory=PrintLabels)

    placeholder_image_url: str = Field(
        default="/placeholder.svg",
        description="Image used when a billboard has no photo at all.",
    )
    default_background_url: str = Field(
        default="/ipg.svg",
        description="Page background used when global settings name none.",
    )
    qr_fallback_base_url: str = Field(
        default="https://example.com",
        description="Base of the QR URL of billboards without GPS data.",
    )

    size_ranks: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_SIZE_RANKS),
        description="Print order of size classes; lower prints first.",
    )
    unranked_size: int = Field(
        default=50, description="Rank of sizes missing from size_ranks."
    )
    level_ranks: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_LEVEL_RANKS),
        description="Print order of installation levels.",
    )
    unranked_level: int = Field(
        default=99, description="Rank of levels missing from level_ranks."
    )

    text_direction: Literal["ltr", "rtl"] = Field(
        default="ltr", description="Direction of every positioned element."
    )
