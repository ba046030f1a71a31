"""Print layout resolution: classification, overrides, rendering, composition."""

from .composer import (
    compose_batch,
    compose_document,
    compose_page,
    document_title,
    editor_elements,
    print_elements,
)
from .config import EngineConfig, PrintLabels, PrintToggles
from .elements import ELEMENT_ORDER, FACE_PAIR, ElementKey, LinkedFieldGroup
from .facts import (
    BillboardPrintFacts,
    ContractInfo,
    PreparedBillboard,
    simulate_status,
)
from .mode_classifier import classify_mode, resolve_mode
from .modes import PreviewStatus, PrintMode, StatusOverrideKey
from .overrides import effective
from .renderer import RenderedElement, render, render_badges
from .session import CopyKind, PrintTarget, RenderSession, RenderTarget, Surface
from .settings import (
    ElementPatch,
    ElementSettings,
    GlobalSettings,
    ModeSettings,
    resolve_with_defaults,
)
from .sorting import sort_for_print
from .status_classifier import classify_status, detect_badges, override_status
from .style import StyleDeclaration

__all__ = [
    "compose_batch",
    "compose_document",
    "compose_page",
    "document_title",
    "editor_elements",
    "print_elements",
    "EngineConfig",
    "PrintLabels",
    "PrintToggles",
    "ELEMENT_ORDER",
    "FACE_PAIR",
    "ElementKey",
    "LinkedFieldGroup",
    "BillboardPrintFacts",
    "ContractInfo",
    "PreparedBillboard",
    "simulate_status",
    "classify_mode",
    "resolve_mode",
    "PreviewStatus",
    "PrintMode",
    "StatusOverrideKey",
    "effective",
    "RenderedElement",
    "render",
    "render_badges",
    "CopyKind",
    "PrintTarget",
    "RenderSession",
    "RenderTarget",
    "Surface",
    "ElementPatch",
    "ElementSettings",
    "GlobalSettings",
    "ModeSettings",
    "resolve_with_defaults",
    "sort_for_print",
    "classify_status",
    "detect_badges",
    "override_status",
    "StyleDeclaration",
]
