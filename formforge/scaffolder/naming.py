"""Name derivation shared by every artifact emitter.

Symbols, file paths and import specifiers are all derived here from the form
name and the routing style, so the component, schema, server action, API route
and MongoDB client always agree on what they export and where it lives.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass

from ..models import FormSpec, RouterType

PERSISTENCE_CLIENT_PATH = "lib/mongodb.ts"
MONGODB_URI_ENV = "MONGODB_URI"


@dataclass(frozen=True)
class FormNames:
    """Every name and path derived from one ``FormSpec``."""

    form_name: str
    router_type: RouterType

    # -- Symbols -------------------------------------------------------

    @property
    def schema_symbol(self) -> str:
        return f"{self.form_name}Schema"

    @property
    def action_symbol(self) -> str:
        return f"{self.form_name}Action"

    @property
    def values_type(self) -> str:
        return f"{self.form_name}Values"

    @property
    def component_symbol(self) -> str:
        return f"{self.form_name}Form"

    # -- Paths (relative to the output root, posix separators) ---------

    @property
    def component_path(self) -> str:
        return f"{self.router_type.value}/{self.form_name}.tsx"

    @property
    def schema_path(self) -> str:
        return f"{self.form_name}Schema.ts"

    @property
    def action_path(self) -> str:
        return f"{self.router_type.value}/{self.form_name}Action.ts"

    @property
    def endpoint_path(self) -> str:
        if self.router_type is RouterType.APP:
            return f"app/api/{self.form_name}/route.ts"
        return f"pages/api/{self.form_name}.ts"

    @property
    def persistence_path(self) -> str:
        return PERSISTENCE_CLIENT_PATH

    @property
    def snapshot_path(self) -> str:
        return f"{self.form_name}Config.json"

    # -- URLs ----------------------------------------------------------

    @property
    def endpoint_url(self) -> str:
        """Public URL of the API route; identical for both routers."""
        return f"/api/{self.form_name}"

    # -- Imports -------------------------------------------------------

    def import_from(self, importer_path: str, target_path: str) -> str:
        return relative_import(importer_path, target_path)


def names_for(spec: FormSpec) -> FormNames:
    return FormNames(form_name=spec.form_name, router_type=spec.router_type)


def relative_import(importer_path: str, target_path: str) -> str:
    """Return the ES module specifier that *importer_path* uses for *target_path*.

    Both paths are relative to the output root.  The target's ``.ts``/``.tsx``
    extension is dropped and same-directory imports get a ``./`` prefix.

    Examples::

        relative_import("app/Contact.tsx", "ContactSchema.ts")            -> "../ContactSchema"
        relative_import("app/api/Contact/route.ts", "ContactSchema.ts")   -> "../../../ContactSchema"
        relative_import("app/Contact.tsx", "app/ContactAction.ts")        -> "./ContactAction"
    """
    stem, ext = posixpath.splitext(target_path)
    if ext not in (".ts", ".tsx"):
        stem = target_path
    specifier = posixpath.relpath(stem, posixpath.dirname(importer_path) or ".")
    if not specifier.startswith("."):
        specifier = f"./{specifier}"
    return specifier
