"""Print modes and exception statuses."""

from __future__ import annotations

from enum import Enum


class PrintMode(str, Enum):
    """Layout variant of a print page. Each mode owns its own element settings."""

    DEFAULT = "default"
    WITH_DESIGN = "with_design"
    WITHOUT_DESIGN = "without_design"
    TWO_FACES = "two_faces"
    TWO_FACES_WITH_DESIGNS = "two_faces_with_designs"
    SINGLE_FACE = "single_face"
    SINGLE_INSTALLATION_WITH_DESIGNS = "single_installation_with_designs"


PRINT_MODE_LABELS: dict[PrintMode, str] = {
    PrintMode.DEFAULT: "Default",
    PrintMode.WITH_DESIGN: "With attached design",
    PrintMode.WITHOUT_DESIGN: "Without design",
    PrintMode.TWO_FACES: "Two faces (front and back)",
    PrintMode.TWO_FACES_WITH_DESIGNS: "Two faces with designs",
    PrintMode.SINGLE_FACE: "Single face (installation photo and design)",
    PrintMode.SINGLE_INSTALLATION_WITH_DESIGNS: (
        "Single installation photo with designs below"
    ),
}


class StatusOverrideKey(str, Enum):
    """Exception status of a billboard that may patch a mode's settings."""

    NO_DESIGN = "no-design"
    ONE_DESIGN = "one-design"
    ONE_INSTALL = "one-install"


class PreviewStatus(str, Enum):
    """Status simulated by the live preview.

    ``NONE`` edits the base settings; ``ALL`` shows every badge at once but
    does not select an override set.
    """

    NONE = "none"
    NO_DESIGN = "no-design"
    ONE_DESIGN = "one-design"
    ONE_INSTALL = "one-install"
    ALL = "all-statuses"

    @property
    def override_key(self) -> StatusOverrideKey | None:
        """The override set being edited, if this preview selects exactly one."""
        if self in (PreviewStatus.NONE, PreviewStatus.ALL):
            return None
        return StatusOverrideKey(self.value)
