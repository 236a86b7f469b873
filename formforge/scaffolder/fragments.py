"""Field, button and link fragments of the form body.

Each renderer is a pure function of one descriptor plus form-wide context and
returns a frozen fragment.  Fragments carry no markup; the component template
serialises them in a single pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..models import ButtonSpec, FieldSpec, FieldType, FormSpec

SUBMITTING_LABEL = "Submitting..."


@dataclass(frozen=True)
class FieldFragment:
    """A labelled, validation-bound input."""

    name: str
    label: str
    placeholder: str
    input_type: str
    control: str  # "Input" or "Textarea"

    @property
    def multiline(self) -> bool:
        return self.control == "Textarea"


@dataclass(frozen=True)
class ButtonFragment:
    label: str
    variant: str
    submit: bool
    tracks_loading: bool

    @property
    def html_type(self) -> str:
        return "submit" if self.submit else "button"

    @property
    def busy_label(self) -> Optional[str]:
        return SUBMITTING_LABEL if self.tracks_loading else None


@dataclass(frozen=True)
class LinkFragment:
    text: str
    href: str


def render_field(field: FieldSpec) -> FieldFragment:
    control = "Textarea" if field.type is FieldType.TEXTAREA else "Input"
    return FieldFragment(
        name=field.name,
        label=field.label,
        placeholder=field.placeholder,
        input_type=field.type.value,
        control=control,
    )


def render_button(
    button: ButtonSpec,
    position: int,
    *,
    submit_index: int,
    loading_state: bool,
) -> ButtonFragment:
    """Render the button at 1-based *position*.

    Only the submit button reacts to the loading state: its label switches to
    ``Submitting...`` and it is disabled while a submission is in flight.
    """
    submit = position == submit_index
    return ButtonFragment(
        label=button.name,
        variant=button.variant.value,
        submit=submit,
        tracks_loading=submit and loading_state,
    )


def render_link(spec: FormSpec) -> Optional[LinkFragment]:
    if not spec.add_link:
        return None
    return LinkFragment(text=spec.link_text, href=spec.link_href)


def render_fields(spec: FormSpec) -> list[FieldFragment]:
    return [render_field(field) for field in spec.fields]


def render_buttons(spec: FormSpec) -> list[ButtonFragment]:
    return [
        render_button(
            button,
            position,
            submit_index=spec.submit_button_index,
            loading_state=spec.add_loading_state,
        )
        for position, button in enumerate(spec.buttons, start=1)
    ]
