"""Element registry for billboard print pages.

The registry is the closed catalog of placeable elements: their stable
storage keys, built-in default geometry and style, and the linked-field
relationships between elements that must share geometry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ElementKey(str, Enum):
    """Identifier of one placeable element on a print page.

    Values are the keys used in stored settings records and must not change.
    """

    CONTRACT_NUMBER = "contractNumber"
    AD_TYPE = "adType"
    BILLBOARD_NAME = "billboardName"
    SIZE = "size"
    FACES_COUNT = "facesCount"
    IMAGE = "image"
    LOCATION_INFO = "locationInfo"
    LANDMARK_INFO = "landmarkInfo"
    QR_CODE = "qrCode"
    DESIGNS = "designs"
    INSTALLATION_DATE = "installationDate"
    PRINT_TYPE = "printType"
    CUTOUT_IMAGE = "cutoutImage"
    SINGLE_INSTALLATION_IMAGE = "singleInstallationImage"
    LINKED_INSTALLATION_IMAGES = "linkedInstallationImages"
    FACE_A_IMAGE = "faceAImage"
    FACE_B_IMAGE = "faceBImage"
    TWO_FACES_CONTAINER = "twoFacesContainer"
    STATUS_BADGES = "statusBadges"

    @classmethod
    def parse(cls, value: str) -> ElementKey | None:
        """Return the key for a stored string, or None if it is not registered."""
        try:
            return cls(value)
        except ValueError:
            return None


# Iteration order of the composer. Later elements paint over earlier ones.
ELEMENT_ORDER: tuple[ElementKey, ...] = tuple(ElementKey)

ELEMENT_LABELS: dict[ElementKey, str] = {
    ElementKey.CONTRACT_NUMBER: "Contract number",
    ElementKey.AD_TYPE: "Ad type",
    ElementKey.BILLBOARD_NAME: "Billboard name",
    ElementKey.SIZE: "Size",
    ElementKey.FACES_COUNT: "Faces count",
    ElementKey.IMAGE: "Billboard image",
    ElementKey.LOCATION_INFO: "Municipality and district",
    ElementKey.LANDMARK_INFO: "Nearest landmark",
    ElementKey.QR_CODE: "QR code",
    ElementKey.DESIGNS: "Designs",
    ElementKey.INSTALLATION_DATE: "Installation date",
    ElementKey.PRINT_TYPE: "Print type (installation team)",
    ElementKey.CUTOUT_IMAGE: "Cutout image",
    ElementKey.SINGLE_INSTALLATION_IMAGE: "Installation image (single)",
    ElementKey.LINKED_INSTALLATION_IMAGES: "Installation images (linked faces)",
    ElementKey.FACE_A_IMAGE: "Front face image",
    ElementKey.FACE_B_IMAGE: "Back face image",
    ElementKey.TWO_FACES_CONTAINER: "Two faces container (with designs)",
    ElementKey.STATUS_BADGES: "Status badges",
}


@dataclass(frozen=True)
class LinkedFieldGroup:
    """A pair of elements whose geometry and border fields are shared.

    The primary member is authoritative: whenever a stored record holds
    diverging values, the secondary is re-linked from the primary.
    """

    primary: ElementKey
    secondary: ElementKey
    fields: tuple[str, ...]

    def __contains__(self, key: object) -> bool:
        return key in (self.primary, self.secondary)

    def partner(self, key: ElementKey) -> ElementKey:
        """Return the other member of the pair."""
        if key == self.primary:
            return self.secondary
        if key == self.secondary:
            return self.primary
        raise KeyError(key)


LINKED_FIELDS: tuple[str, ...] = (
    "top",
    "width",
    "height",
    "border_width",
    "border_color",
    "border_radius",
    "border_radius_top_left",
    "border_radius_top_right",
    "border_radius_bottom_left",
    "border_radius_bottom_right",
)

FACE_PAIR = LinkedFieldGroup(
    primary=ElementKey.FACE_A_IMAGE,
    secondary=ElementKey.FACE_B_IMAGE,
    fields=LINKED_FIELDS,
)

LINKED_GROUPS: tuple[LinkedFieldGroup, ...] = (FACE_PAIR,)


def linked_group_for(key: ElementKey) -> LinkedFieldGroup | None:
    """Return the linked group containing ``key``, if any."""
    for group in LINKED_GROUPS:
        if key in group:
            return group
    return None


# Built-in defaults, expressed with the stored (camelCase) field names so the
# same table can be validated exactly like a stored record.
DEFAULT_ELEMENT_RECORDS: dict[ElementKey, dict[str, object]] = {
    ElementKey.CONTRACT_NUMBER: {
        "visible": True,
        "top": "40mm",
        "right": "12mm",
        "fontSize": "14px",
        "fontWeight": "700",
        "color": "#000",
    },
    ElementKey.AD_TYPE: {
        "visible": True,
        "top": "40mm",
        "right": "35mm",
        "fontSize": "14px",
        "fontWeight": "700",
        "color": "#000",
    },
    ElementKey.BILLBOARD_NAME: {
        "visible": True,
        "top": "200px",
        "left": "16%",
        "fontSize": "20px",
        "fontWeight": "700",
        "color": "#111",
        "width": "450px",
        "textAlign": "center",
    },
    ElementKey.SIZE: {
        "visible": True,
        "top": "184px",
        "left": "63%",
        "fontSize": "35px",
        "fontWeight": "900",
        "color": "#000",
        "width": "300px",
        "textAlign": "center",
    },
    ElementKey.FACES_COUNT: {
        "visible": True,
        "top": "220px",
        "left": "63%",
        "fontSize": "14px",
        "color": "#000",
        "width": "300px",
        "textAlign": "center",
    },
    ElementKey.IMAGE: {
        "visible": True,
        "top": "340px",
        "left": "0",
        "width": "650px",
        "height": "350px",
        "borderWidth": "4px",
        "borderColor": "#000",
        "borderRadius": "0 0 10px 10px",
        "rotation": "0",
        "objectFit": "contain",
        "objectPosition": "center",
    },
    ElementKey.LOCATION_INFO: {
        "visible": True,
        "top": "229mm",
        "left": "0",
        "fontSize": "21px",
        "fontWeight": "700",
        "width": "150mm",
        "color": "#000",
    },
    ElementKey.LANDMARK_INFO: {
        "visible": True,
        "top": "239mm",
        "left": "0",
        "fontSize": "21px",
        "fontWeight": "500",
        "width": "150mm",
        "color": "#000",
    },
    ElementKey.QR_CODE: {
        "visible": True,
        "top": "970px",
        "left": "245px",
        "width": "100px",
        "height": "100px",
        "rotation": "0",
    },
    ElementKey.DESIGNS: {
        "visible": True,
        "top": "700px",
        "left": "75px",
        "width": "640px",
        "height": "200px",
        "gap": "38px",
        "rotation": "0",
        "objectFit": "contain",
        "objectPosition": "center",
    },
    ElementKey.INSTALLATION_DATE: {
        "visible": True,
        "top": "42.869mm",
        "right": "116mm",
        "fontSize": "11px",
        "fontWeight": "400",
        "color": "#000",
    },
    ElementKey.PRINT_TYPE: {
        "visible": True,
        "top": "170px",
        "right": "83px",
        "fontSize": "18px",
        "color": "#d4af37",
        "fontWeight": "900",
    },
    ElementKey.CUTOUT_IMAGE: {
        "visible": True,
        "top": "600px",
        "left": "75px",
        "width": "200px",
        "height": "200px",
        "borderWidth": "2px",
        "borderColor": "#000",
        "rotation": "0",
        "objectFit": "contain",
        "objectPosition": "center",
    },
    ElementKey.SINGLE_INSTALLATION_IMAGE: {
        "visible": True,
        "top": "340px",
        "left": "50px",
        "width": "600px",
        "height": "280px",
        "borderWidth": "3px",
        "borderColor": "#000",
        "borderRadius": "8px",
        "rotation": "0",
        "objectFit": "contain",
        "objectPosition": "center",
    },
    ElementKey.LINKED_INSTALLATION_IMAGES: {
        "visible": True,
        "top": "700px",
        "left": "50px",
        "width": "680px",
        "height": "200px",
        "gap": "16px",
        "borderWidth": "3px",
        "borderColor": "#ccc",
        "borderRadius": "8px",
        "rotation": "0",
        "objectFit": "contain",
        "objectPosition": "center",
    },
    ElementKey.FACE_A_IMAGE: {
        "visible": True,
        "top": "700px",
        "left": "75px",
        "width": "260px",
        "height": "159px",
        "borderWidth": "3px",
        "borderColor": "#ccc",
        "rotation": "0",
        "objectFit": "contain",
        "objectPosition": "center",
    },
    ElementKey.FACE_B_IMAGE: {
        "visible": True,
        "top": "700px",
        "left": "380px",
        "width": "260px",
        "height": "159px",
        "borderWidth": "3px",
        "borderColor": "#ccc",
        "rotation": "0",
        "objectFit": "contain",
        "objectPosition": "center",
    },
    ElementKey.TWO_FACES_CONTAINER: {
        "visible": True,
        "top": "700px",
        "left": "75px",
        "width": "640px",
        "height": "200px",
        "gap": "20px",
        "rotation": "0",
        "objectFit": "contain",
        "objectPosition": "center",
    },
    ElementKey.STATUS_BADGES: {
        "visible": True,
        "top": "260px",
        "left": "16%",
        "fontSize": "11px",
        "fontWeight": "600",
        "color": "#fff",
        "width": "450px",
        "textAlign": "center",
    },
}
