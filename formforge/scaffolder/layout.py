"""Whole-form layout composition.

Picks one of three body layouts from ``FormSpec.form_style`` and derives the
container's Tailwind classes from the alignment and width settings.  Every
lookup has an explicit default: an unknown style falls back to the stacked
layout and an unknown alignment contributes no class.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models import FormSpec, HorizontalAlignment, LayoutStyle, VerticalAlignment
from .fragments import ButtonFragment, FieldFragment, LinkFragment


class LayoutVariant(str, Enum):
    STACKED = "stacked"
    GROUPED = "grouped"
    INLINE = "inline"


_LAYOUT_VARIANTS: dict[str, LayoutVariant] = {
    LayoutStyle.DEFAULT.value: LayoutVariant.STACKED,
    LayoutStyle.CARD.value: LayoutVariant.GROUPED,
    LayoutStyle.INLINE.value: LayoutVariant.INLINE,
}

_HORIZONTAL_CLASSES: dict[str, str] = {
    HorizontalAlignment.LEFT.value: "items-start",
    HorizontalAlignment.CENTER.value: "mx-auto",
    HorizontalAlignment.RIGHT.value: "items-end",
}

_VERTICAL_CLASSES: dict[str, str] = {
    VerticalAlignment.TOP.value: "justify-start",
    VerticalAlignment.CENTER.value: "justify-center",
    VerticalAlignment.BOTTOM.value: "justify-end",
}

CARD_DESCRIPTION = "Please fill out the form below"


@dataclass(frozen=True)
class LayoutPlan:
    """The composed form body plus the outer container's classes."""

    variant: LayoutVariant
    title: str
    fields: tuple[FieldFragment, ...]
    buttons: tuple[ButtonFragment, ...]
    link: Optional[LinkFragment]
    container_classes: tuple[str, ...]

    @property
    def container_class_name(self) -> str:
        return " ".join(self.container_classes)

    @property
    def description(self) -> str:
        return CARD_DESCRIPTION


def layout_variant(style: str) -> LayoutVariant:
    return _LAYOUT_VARIANTS.get(style, LayoutVariant.STACKED)


def container_classes(spec: FormSpec) -> tuple[str, ...]:
    """Return the outer container's class tokens in emission order."""
    tokens = [
        "flex",
        "flex-col",
        _HORIZONTAL_CLASSES.get(spec.horizontal_alignment, ""),
        _VERTICAL_CLASSES.get(spec.vertical_alignment, ""),
        "min-h-screen",
    ]
    tokens.extend(spec.form_width.split())
    return tuple(token for token in tokens if token)


def compose_layout(
    spec: FormSpec,
    fields: list[FieldFragment],
    buttons: list[ButtonFragment],
    link: Optional[LinkFragment],
) -> LayoutPlan:
    return LayoutPlan(
        variant=layout_variant(spec.form_style),
        title=spec.form_name,
        fields=tuple(fields),
        buttons=tuple(buttons),
        link=link,
        container_classes=container_classes(spec),
    )
