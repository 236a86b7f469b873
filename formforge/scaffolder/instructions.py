"""Post-generation setup instructions for the generated form."""

from __future__ import annotations

from ..models import FieldType, FormSpec, LayoutStyle
from .naming import MONGODB_URI_ENV

BASE_COMMANDS: tuple[str, ...] = (
    "npm install react-hook-form @hookform/resolvers zod",
    "npx shadcn@latest init",
)


def install_commands(spec: FormSpec) -> list[str]:
    """Shell commands that install everything the generated sources import."""
    components = ["form", "input", "button"]
    if any(field.type is FieldType.TEXTAREA for field in spec.fields):
        components.append("textarea")
    if spec.form_style == LayoutStyle.CARD.value:
        components.append("card")

    commands = list(BASE_COMMANDS)
    commands.append(f"npx shadcn@latest add {' '.join(components)}")
    if spec.include_database:
        commands.append("npm install mongodb")
    return commands


def environment_notes(spec: FormSpec) -> list[str]:
    """Environment variables the generated sources expect, as ``.env`` lines."""
    if not spec.include_database:
        return []
    return [f"{MONGODB_URI_ENV}=your_mongodb_connection_string_here"]
