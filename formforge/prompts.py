"""Interactive question flow that collects a ``FormSpec``.

A linear sequence of Rich prompts.  Follow-up questions are only asked when
the answer they depend on makes them relevant (link text only with a link,
server actions only with the app router, and so on).  Answers are checked as
they are typed so the resulting ``FormSpec`` always validates.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Optional

from rich.prompt import Confirm, IntPrompt, Prompt

from .models import (
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_FORM_WIDTH,
    DEFAULT_SUCCESS_MESSAGE,
    HEX_COLOR_RE,
    ButtonVariant,
    FieldType,
    FormSpec,
    HorizontalAlignment,
    LayoutStyle,
    RouterType,
    VerticalAlignment,
)
from .utils import console

Validator = Callable[[str], Optional[str]]

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


# ---------------------------------------------------------------------------
# Validators (return an error message, or None when the answer is fine)
# ---------------------------------------------------------------------------


def _not_empty(label: str) -> Validator:
    def check(answer: str) -> Optional[str]:
        return None if answer.strip() else f"{label} cannot be empty"
    return check


def _identifier(label: str, taken: Optional[set[str]] = None) -> Validator:
    def check(answer: str) -> Optional[str]:
        if not _IDENTIFIER_RE.match(answer.strip()):
            return f"{label} must be a valid identifier (letters, digits, _ or $)"
        if taken is not None and answer.strip() in taken:
            return f"{label} {answer.strip()!r} is already used"
        return None
    return check


def _hex_color(answer: str) -> Optional[str]:
    return None if HEX_COLOR_RE.match(answer.strip()) else "Please enter a valid hex color code"


# ---------------------------------------------------------------------------
# Prompt primitives
# ---------------------------------------------------------------------------


def _ask(
    message: str,
    *,
    validate: Optional[Validator] = None,
    default: Optional[str] = None,
    choices: Optional[list[str]] = None,
) -> str:
    kwargs: dict[str, Any] = {"console": console}
    if default is not None:
        kwargs["default"] = default
    if choices is not None:
        kwargs["choices"] = choices
    while True:
        answer = Prompt.ask(message, **kwargs)
        error = validate(answer) if validate else None
        if error is None:
            return answer.strip()
        console.print(f"[prompt.invalid]{error}")


def _ask_int(message: str, *, low: int, high: Optional[int] = None) -> int:
    while True:
        answer = IntPrompt.ask(message, console=console)
        if answer >= low and (high is None or answer <= high):
            return answer
        if high is None:
            console.print(f"[prompt.invalid]Please enter a number of at least {low}")
        else:
            console.print(f"[prompt.invalid]Please enter a number between {low} and {high}")


def _confirm(message: str, *, default: bool) -> bool:
    return Confirm.ask(message, default=default, console=console)


def _values(enum_cls: Any) -> list[str]:
    return [member.value for member in enum_cls]


# ---------------------------------------------------------------------------
# Flow
# ---------------------------------------------------------------------------


def collect_form_spec() -> FormSpec:
    """Ask every question and return the validated ``FormSpec``."""
    answers: dict[str, Any] = {}

    answers["form_name"] = _ask(
        "What is the name of your form?", validate=_identifier("Form name")
    )
    field_count = _ask_int("How many input fields do you want in your form?", low=1)
    button_count = _ask_int("How many buttons do you want in your form?", low=1)
    answers["submit_button_index"] = _ask_int(
        "Which button should be the submit button? (starting from 1)",
        low=1,
        high=button_count,
    )

    answers["add_link"] = _confirm("Do you want to add a link to another page?", default=False)
    if answers["add_link"]:
        answers["link_text"] = _ask(
            "Enter the text for the link:", validate=_not_empty("Link text")
        )
        answers["link_href"] = _ask(
            "Enter the href for the link:", validate=_not_empty("Link href")
        )

    answers["router_type"] = _ask(
        "Which router do you want to use?",
        choices=_values(RouterType),
        default=RouterType.APP.value,
    )
    use_server_actions = False
    if answers["router_type"] == RouterType.APP.value:
        use_server_actions = _confirm("Do you want to use Server Actions?", default=True)
    answers["use_server_actions"] = use_server_actions
    if not use_server_actions:
        answers["create_api_route"] = _confirm(
            "Do you want to create an API route for this form?", default=True
        )

    answers["form_style"] = _ask(
        "Choose a form style:",
        choices=_values(LayoutStyle),
        default=LayoutStyle.DEFAULT.value,
    )
    answers["horizontal_alignment"] = _ask(
        "Choose the horizontal alignment for your form:",
        choices=_values(HorizontalAlignment),
        default=HorizontalAlignment.CENTER.value,
    )
    answers["vertical_alignment"] = _ask(
        "Choose the vertical alignment for your form:",
        choices=_values(VerticalAlignment),
        default=VerticalAlignment.CENTER.value,
    )
    answers["form_width"] = _ask(
        "Enter the responsive width for your form (e.g. \"w-full max-w-md\"):",
        default=DEFAULT_FORM_WIDTH,
    )

    answers["use_custom_colors"] = _confirm("Do you want to use custom colors?", default=False)
    if answers["use_custom_colors"]:
        answers["primary_color"] = _ask(
            "Enter the primary color (hex code, e.g. #000000):", validate=_hex_color
        )
        answers["secondary_color"] = _ask(
            "Enter the secondary color (hex code, e.g. #000000):", validate=_hex_color
        )

    answers["add_loading_state"] = _confirm(
        "Do you want to add a loading state to the form?", default=True
    )
    answers["add_error_handling"] = _confirm(
        "Do you want to add error handling to the form?", default=True
    )
    answers["success_message"] = _ask(
        "Enter the success message for the form:", default=DEFAULT_SUCCESS_MESSAGE
    )
    answers["error_message"] = _ask(
        "Enter the error message for the form:", default=DEFAULT_ERROR_MESSAGE
    )

    answers["include_database"] = _confirm(
        "Do you want to include MongoDB database integration?", default=False
    )
    if answers["include_database"]:
        answers["database_name"] = _ask(
            "Enter the name of the database:", validate=_not_empty("Database name")
        )
        answers["collection_name"] = _ask(
            "Enter the name of the collection:", validate=_not_empty("Collection name")
        )

    taken: set[str] = set()
    fields: list[dict[str, str]] = []
    for position in range(1, field_count + 1):
        field = _collect_field(position, taken)
        taken.add(field["name"])
        fields.append(field)
    answers["fields"] = fields
    answers["buttons"] = [_collect_button(position) for position in range(1, button_count + 1)]

    return FormSpec(**answers)


def _collect_field(position: int, taken: set[str]) -> dict[str, str]:
    return {
        "name": _ask(
            f"Name for input field {position}:",
            validate=_identifier("Field name", taken),
        ),
        "label": _ask(
            f"Label for input field {position}:", validate=_not_empty("Field label")
        ),
        "placeholder": _ask(f"Placeholder for input field {position}:", default=""),
        "type": _ask(
            f"Type for input field {position}:",
            choices=_values(FieldType),
            default=FieldType.TEXT.value,
        ),
        "validation": _ask(
            f"Validation rules for input field {position} (e.g. \"required,min:3,max:50\"):",
            default="",
        ),
        "error_message": _ask(
            f"Custom error message for input field {position} (leave blank for default):",
            default="",
        ),
    }


def _collect_button(position: int) -> dict[str, str]:
    return {
        "name": _ask(f"Name for button {position}:", validate=_not_empty("Button name")),
        "variant": _ask(
            f"Choose a variant for button {position}:",
            choices=_values(ButtonVariant),
            default=ButtonVariant.DEFAULT.value,
        ),
    }
