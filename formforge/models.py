"""Pydantic v2 models describing one form to scaffold.

A ``FormSpec`` is the single input of the generator.  It is either collected
by the interactive prompt flow or loaded verbatim from a previously written
``<FormName>Config.json`` snapshot, whose camelCase keys are kept as field
aliases so old snapshots keep loading.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FieldType(str, Enum):
    """HTML input types supported by the field renderer."""
    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    NUMBER = "number"
    DATE = "date"
    TEL = "tel"
    URL = "url"
    TEXTAREA = "textarea"


class ButtonVariant(str, Enum):
    """shadcn/ui button variants."""
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
    OUTLINE = "outline"
    SECONDARY = "secondary"
    GHOST = "ghost"
    LINK = "link"


class RouterType(str, Enum):
    """Next.js routing convention the endpoint is registered with."""
    APP = "app"
    PAGES = "pages"


class LayoutStyle(str, Enum):
    """Whole-form layouts.  ``FormSpec.form_style`` stays a plain string."""
    DEFAULT = "Default"
    CARD = "Card"
    INLINE = "Inline"


class HorizontalAlignment(str, Enum):
    LEFT = "Left"
    CENTER = "Center"
    RIGHT = "Right"


class VerticalAlignment(str, Enum):
    TOP = "Top"
    CENTER = "Center"
    BOTTOM = "Bottom"


DEFAULT_SUCCESS_MESSAGE = "Form submitted successfully!"
DEFAULT_ERROR_MESSAGE = "An error occurred while submitting the form. Please try again."
DEFAULT_FORM_WIDTH = "w-full max-w-md"


# ---------------------------------------------------------------------------
# Field & button models
# ---------------------------------------------------------------------------

class FieldSpec(BaseModel):
    """A single input of the form."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field(..., description="Identifier used as the form value key")
    label: str = Field(..., description="Display label")
    placeholder: str = Field(default="", description="Placeholder text, may be empty")
    type: FieldType = Field(default=FieldType.TEXT, description="Input type")
    validation: str = Field(
        default="",
        description="Comma-separated rule tokens, e.g. 'required,min:3,max:50'",
    )
    error_message: str = Field(
        default="",
        alias="errorMessage",
        description="Custom message used for every constraint of this field",
    )


class ButtonSpec(BaseModel):
    """A button rendered in the form footer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field(..., description="Button label")
    variant: ButtonVariant = Field(default=ButtonVariant.DEFAULT)


# ---------------------------------------------------------------------------
# FormSpec
# ---------------------------------------------------------------------------

class FormSpec(BaseModel):
    """Root configuration describing one form and its generated artifacts."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    form_name: str = Field(..., alias="formName")
    fields: list[FieldSpec] = Field(..., alias="inputFields", min_length=1)
    buttons: list[ButtonSpec] = Field(..., min_length=1)
    submit_button_index: int = Field(default=1, alias="submitButtonIndex")

    # Link
    add_link: bool = Field(default=False, alias="addLink")
    link_text: str = Field(default="", alias="linkText")
    link_href: str = Field(default="", alias="linkHref")

    # Routing and submission
    router_type: RouterType = Field(default=RouterType.APP, alias="routerType")
    use_server_actions: bool = Field(default=False, alias="useServerActions")
    create_api_route: bool = Field(default=False, alias="createApiRoute")

    # Layout
    form_style: str = Field(default=LayoutStyle.DEFAULT.value, alias="formStyle")
    horizontal_alignment: str = Field(
        default=HorizontalAlignment.CENTER.value, alias="horizontalAlignment"
    )
    vertical_alignment: str = Field(
        default=VerticalAlignment.CENTER.value, alias="verticalAlignment"
    )
    form_width: str = Field(default=DEFAULT_FORM_WIDTH, alias="formWidth")

    # Theme
    use_custom_colors: bool = Field(default=False, alias="useCustomColors")
    primary_color: Optional[str] = Field(default=None, alias="primaryColor")
    secondary_color: Optional[str] = Field(default=None, alias="secondaryColor")

    # Behaviour
    add_loading_state: bool = Field(default=True, alias="addLoadingState")
    add_error_handling: bool = Field(default=True, alias="addErrorHandling")
    success_message: str = Field(default=DEFAULT_SUCCESS_MESSAGE, alias="successMessage")
    error_message: str = Field(default=DEFAULT_ERROR_MESSAGE, alias="errorMessage")

    # Persistence
    include_database: bool = Field(default=False, alias="includeDatabase")
    database_name: Optional[str] = Field(default=None, alias="databaseName")
    collection_name: Optional[str] = Field(default=None, alias="collectionName")

    @model_validator(mode="after")
    def _check_invariants(self) -> "FormSpec":
        violations = self.invariant_violations()
        if violations:
            raise ValueError("; ".join(message for _, message in violations))
        return self

    def invariant_violations(self) -> list[tuple[str, str]]:
        """Return ``(field, message)`` pairs for every violated invariant.

        Shared by model validation and by the generator's pre-flight check,
        which also sees instances built with ``model_construct``.
        """
        problems: list[tuple[str, str]] = []

        if not _IDENTIFIER_RE.match(self.form_name or ""):
            problems.append(
                ("form_name", f"form_name {self.form_name!r} is not a valid identifier")
            )

        count = len(self.buttons or [])
        if not 1 <= self.submit_button_index <= count:
            problems.append((
                "submit_button_index",
                f"submit_button_index {self.submit_button_index} is out of range 1..{count}",
            ))

        seen: set[str] = set()
        for position, field in enumerate(self.fields or [], start=1):
            if not _IDENTIFIER_RE.match(field.name):
                problems.append((
                    "fields",
                    f"field {position} name {field.name!r} is not a valid identifier",
                ))
            elif field.name in seen:
                problems.append(("fields", f"field name {field.name!r} is used more than once"))
            seen.add(field.name)

        if self.use_custom_colors:
            for attr in ("primary_color", "secondary_color"):
                value = getattr(self, attr)
                if not value or not HEX_COLOR_RE.match(value):
                    problems.append(
                        (attr, f"{attr} {value!r} must be a 6-digit hex color like #1a2b3c")
                    )

        if self.include_database:
            for attr in ("database_name", "collection_name"):
                if not (getattr(self, attr) or "").strip():
                    problems.append(
                        (attr, f"{attr} is required when include_database is enabled")
                    )

        if self.add_link:
            for attr in ("link_text", "link_href"):
                if not getattr(self, attr).strip():
                    problems.append((attr, f"{attr} is required when add_link is enabled"))

        return problems

    # ------------------------------------------------------------------
    # Snapshot helpers
    # ------------------------------------------------------------------

    def to_snapshot(self) -> str:
        """Serialise to the JSON snapshot format (camelCase keys)."""
        return self.model_dump_json(indent=2, by_alias=True)

    @classmethod
    def from_snapshot(cls, raw: str) -> "FormSpec":
        return cls.model_validate_json(raw)

    @classmethod
    def load(cls, path: str | Path) -> "FormSpec":
        """Load a previously written ``<FormName>Config.json`` snapshot."""
        return cls.from_snapshot(Path(path).read_text(encoding="utf-8"))
