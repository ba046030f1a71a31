"""Element settings, status overrides and their stored representation.

Settings records are stored as JSON objects keyed by ``ElementKey`` values.
Field names are camelCase in storage and snake_case in Python; the models
accept both. One reserved top-level key carries the status override map.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from billboard_print.print_engine.layout.elements import (
    DEFAULT_ELEMENT_RECORDS,
    LINKED_GROUPS,
    ElementKey,
    linked_group_for,
)
from billboard_print.print_engine.layout.modes import StatusOverrideKey

logger = logging.getLogger(__name__)

STATUS_OVERRIDES_KEY = "__statusOverrides"

ObjectFit = Literal["cover", "contain", "fill", "none", "scale-down"]


class ElementSettings(BaseModel):
    """Placement, typography and image style of one element in one mode.

    Lengths are CSS length strings ("40mm", "16%", "0"). For absolute
    placement only one of top/bottom and one of left/right is meaningful.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    visible: bool = True

    top: str | None = None
    left: str | None = None
    right: str | None = None
    bottom: str | None = None

    width: str | None = None
    height: str | None = None
    min_width: str | None = None

    font_size: str | None = None
    font_weight: str | None = None
    font_family: str | None = None
    color: str | None = None
    text_align: str | None = None

    object_fit: ObjectFit | None = None
    object_position: str | None = None
    border_width: str | None = None
    border_color: str | None = None
    border_radius: str | None = None
    border_radius_top_left: str | None = None
    border_radius_top_right: str | None = None
    border_radius_bottom_left: str | None = None
    border_radius_bottom_right: str | None = None
    rotation: float | None = None
    """Signed rotation in degrees."""

    gap: str | None = None
    """Gap between the sub-images of a group element."""

    label: str | None = None
    """Overrides the label of elements rendered as "label: value"."""

    @field_validator("*", mode="before")
    @classmethod
    def _blank_strings_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_record(self) -> dict[str, Any]:
        """Serialize with storage field names, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ElementPatch(ElementSettings):
    """A partial ElementSettings. Unset (None) fields fall through to the base."""

    visible: bool | None = None  # type: ignore[assignment]


def apply_patch(base: ElementSettings, patch: ElementPatch | None) -> ElementSettings:
    """Shallow-merge ``patch`` over ``base``; the patch wins per field."""
    if patch is None:
        return base
    update = patch.model_dump(exclude_none=True)
    if not update:
        return base
    return base.model_copy(update=update)


def _validated_field_name(field: str) -> str:
    """Map a storage or Python field name to the Python field name."""
    if field in ElementSettings.model_fields:
        return field
    for name, info in ElementSettings.model_fields.items():
        if info.alias == field:
            return name
    raise ValueError(f"Unknown element setting field: {field!r}")


def default_elements() -> dict[ElementKey, ElementSettings]:
    """Return the built-in default settings for every registered element."""
    return {
        key: ElementSettings.model_validate(record)
        for key, record in DEFAULT_ELEMENT_RECORDS.items()
    }


def default_element(key: ElementKey) -> ElementSettings:
    """Return the built-in default settings of one element."""
    record = DEFAULT_ELEMENT_RECORDS.get(key)
    if record is None:
        return ElementSettings()
    return ElementSettings.model_validate(record)


def _link_pairs(
    elements: dict[ElementKey, ElementSettings],
) -> dict[ElementKey, ElementSettings]:
    """Copy linked fields from each group's primary onto its secondary."""
    for group in LINKED_GROUPS:
        primary = elements.get(group.primary)
        secondary = elements.get(group.secondary)
        if primary is None or secondary is None:
            continue
        shared = {name: getattr(primary, name) for name in group.fields}
        if any(getattr(secondary, name) != value for name, value in shared.items()):
            logger.debug(
                "Re-linking %s from %s", group.secondary.value, group.primary.value
            )
            elements[group.secondary] = secondary.model_copy(update=shared)
    return elements


def _link_patches(
    patches: dict[ElementKey, ElementPatch],
) -> dict[ElementKey, ElementPatch]:
    """Copy linked fields from each group's primary patch onto its secondary.

    A linked field unset in the primary patch is unset in the secondary as
    well, so both fall through to the (linked) base settings.
    """
    for group in LINKED_GROUPS:
        primary = patches.get(group.primary)
        secondary = patches.get(group.secondary)
        if primary is None and secondary is None:
            continue
        shared = {
            name: getattr(primary, name) if primary is not None else None
            for name in group.fields
        }
        current = secondary if secondary is not None else ElementPatch()
        if all(getattr(current, name) == value for name, value in shared.items()):
            continue
        logger.debug(
            "Re-linking %s override from %s", group.secondary.value, group.primary.value
        )
        linked = current.model_copy(update=shared)
        if linked.model_dump(exclude_none=True):
            patches[group.secondary] = linked
        else:
            patches.pop(group.secondary, None)
    return patches


class ModeSettings(BaseModel):
    """All element settings of one print mode plus its status overrides.

    Instances are immutable; every edit returns a new ModeSettings.
    """

    model_config = ConfigDict(frozen=True)

    elements: dict[ElementKey, ElementSettings] = Field(default_factory=dict)
    status_overrides: dict[StatusOverrideKey, dict[ElementKey, ElementPatch]] = (
        Field(default_factory=dict)
    )

    @model_validator(mode="after")
    def _link_faces(self) -> ModeSettings:
        # Validated containers are fresh copies owned by this instance.
        _link_pairs(self.elements)
        for patches in self.status_overrides.values():
            _link_patches(patches)
        return self

    @classmethod
    def defaults(cls) -> ModeSettings:
        return cls(elements=default_elements())

    def element(self, key: ElementKey) -> ElementSettings:
        """Base settings of ``key``, falling back to the built-in default."""
        found = self.elements.get(key)
        return found if found is not None else default_element(key)

    def override(
        self, status: StatusOverrideKey, key: ElementKey
    ) -> ElementPatch | None:
        return self.status_overrides.get(status, {}).get(key)

    def with_field(
        self,
        key: ElementKey,
        field: str,
        value: Any,
        *,
        status: StatusOverrideKey | None = None,
    ) -> ModeSettings:
        """Return a copy with one field of one element changed.

        With ``status`` the change goes to that status's override map and the
        base settings are untouched; without it only the base settings change.
        Linked fields are written to both members of their group.
        """
        name = _validated_field_name(field)
        group = linked_group_for(key)
        targets = [key]
        if group is not None and name in group.fields:
            targets.append(group.partner(key))

        if status is not None:
            overrides = {
                s: dict(patches) for s, patches in self.status_overrides.items()
            }
            patches = overrides.setdefault(status, {})
            for target in targets:
                current = patches.get(target) or ElementPatch()
                patches[target] = ElementPatch.model_validate(
                    {**current.model_dump(exclude_none=True), name: value}
                )
            return self.model_copy(update={"status_overrides": overrides})

        elements = dict(self.elements)
        for target in targets:
            current = self.element(target)
            elements[target] = ElementSettings.model_validate(
                {**current.model_dump(exclude_none=True), name: value}
            )
        return self.model_copy(update={"elements": elements})

    def with_element(self, key: ElementKey, settings: ElementSettings) -> ModeSettings:
        """Return a copy with the base settings of ``key`` replaced."""
        elements = dict(self.elements)
        elements[key] = settings
        group = linked_group_for(key)
        if group is not None:
            partner = group.partner(key)
            shared = {name: getattr(settings, name) for name in group.fields}
            elements[partner] = self.element(partner).model_copy(update=shared)
        return self.model_copy(update={"elements": elements})

    def without_status(self, status: StatusOverrideKey) -> ModeSettings:
        """Return a copy with every override of ``status`` removed."""
        overrides = {
            s: dict(patches)
            for s, patches in self.status_overrides.items()
            if s != status
        }
        return self.model_copy(update={"status_overrides": overrides})

    def with_elements_of(self, other: ModeSettings) -> ModeSettings:
        """Return a copy using ``other``'s base elements and keeping our overrides."""
        return self.model_copy(update={"elements": dict(other.elements)})

    def to_record(self) -> dict[str, Any]:
        """Serialize to the stored JSON shape."""
        record: dict[str, Any] = {
            key.value: settings.to_record() for key, settings in self.elements.items()
        }
        overrides = {
            status.value: {
                key.value: patch.to_record() for key, patch in patches.items()
            }
            for status, patches in self.status_overrides.items()
            if patches
        }
        if overrides:
            record[STATUS_OVERRIDES_KEY] = overrides
        return record


def _validate_fields[M: ElementSettings](
    model: type[M], raw: Any, context: str
) -> tuple[M, set[str]] | None:
    """Validate a stored record, dropping only the fields that fail.

    Returns the model and the Python names of the dropped fields, or None when
    ``raw`` is not a record at all.
    """
    if not isinstance(raw, Mapping):
        logger.warning("Ignoring malformed settings for %s: %r", context, type(raw))
        return None
    try:
        return model.model_validate(raw), set()
    except ValidationError as e:
        failed = {str(error["loc"][0]) for error in e.errors() if error["loc"]}

    logger.warning("Ignoring invalid fields of %s: %s", context, sorted(failed))
    valid = {name: value for name, value in raw.items() if name not in failed}
    return model.model_validate(valid), {_validated_field_name(f) for f in failed}


def _parse_overrides(
    raw: Any,
) -> dict[StatusOverrideKey, dict[ElementKey, ElementPatch]]:
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning("Ignoring malformed status overrides: %r", type(raw))
        return {}

    overrides: dict[StatusOverrideKey, dict[ElementKey, ElementPatch]] = {}
    for raw_status, raw_patches in raw.items():
        try:
            status = StatusOverrideKey(raw_status)
        except ValueError:
            logger.debug("Ignoring overrides for unknown status %r", raw_status)
            continue
        if not isinstance(raw_patches, Mapping):
            continue
        patches: dict[ElementKey, ElementPatch] = {}
        for raw_key, raw_patch in raw_patches.items():
            key = ElementKey.parse(raw_key)
            if key is None:
                logger.debug("Ignoring override for unknown element %r", raw_key)
                continue
            parsed = _validate_fields(
                ElementPatch, raw_patch, f"override {raw_status}/{raw_key}"
            )
            if parsed is not None:
                patches[key] = parsed[0]
        if patches:
            overrides[status] = patches
    return overrides


def resolve_with_defaults(
    stored: Mapping[str, Any] | None,
    builtins: Mapping[ElementKey, ElementSettings] | None = None,
) -> ModeSettings:
    """Merge a stored settings record over the built-in defaults.

    Every registered element is present in the result. A stored element
    replaces its default as a whole, except that a stored field failing
    validation (or left blank) keeps that field's default. Unknown top-level
    keys are ignored.

    Args:
        stored: The stored record, or None when nothing has been saved.
        builtins: Defaults to merge over; the built-in table when omitted.

    Returns:
        The effective ModeSettings with linked pairs re-linked, both in the
        base elements and in every status's overrides.
    """
    elements = dict(builtins) if builtins is not None else default_elements()
    stored = stored or {}

    for raw_key, raw_value in stored.items():
        if raw_key == STATUS_OVERRIDES_KEY:
            continue
        key = ElementKey.parse(raw_key)
        if key is None:
            logger.debug("Ignoring unknown element key %r", raw_key)
            continue
        parsed = _validate_fields(ElementSettings, raw_value, f"element {raw_key!r}")
        if parsed is None:
            continue
        settings, failed = parsed
        if failed:
            default = elements.get(key) or default_element(key)
            settings = settings.model_copy(
                update={name: getattr(default, name) for name in failed}
            )
        elements[key] = settings

    return ModeSettings(
        elements=elements,
        status_overrides=_parse_overrides(stored.get(STATUS_OVERRIDES_KEY)),
    )


class GlobalSettings(BaseModel):
    """Settings shared by every mode: page background and fonts."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    background_url: str | None = Field(
        default=None, description="Full-bleed background image of every page."
    )
    background_width: str = "210mm"
    background_height: str = "297mm"
    primary_font: str = Field(default="Doran", description="Document font family.")
    secondary_font: str | None = None
    custom_css: str | None = Field(
        default=None, description="Extra CSS appended to the document stylesheet."
    )
