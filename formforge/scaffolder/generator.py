"""Artifact assembly for one form.

Takes a ``FormSpec`` and produces the complete batch of generated sources:
the client component, the zod schema, the optional server action, API route
and MongoDB client, and a JSON snapshot of the configuration that can be fed
back in later.  Composition is pure and synchronous; only ``write`` touches
the file system, and it starts only once the whole batch has been built.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from jinja2 import TemplateError

from ..models import FormSpec, RouterType
from ..utils import write_file
from .fragments import render_buttons, render_fields, render_link
from .layout import compose_layout
from .naming import MONGODB_URI_ENV, FormNames, names_for
from .rules import CompiledConstraint, compile_rules, lint_rules
from .submission import plan_submission
from .templates import TemplateRenderer, js_string


# ---------------------------------------------------------------------------
# Artifact model
# ---------------------------------------------------------------------------


class ArtifactRole(str, Enum):
    COMPONENT = "Component"
    SCHEMA = "Schema"
    SERVER_HANDLER = "ServerHandler"
    HTTP_ENDPOINT = "HttpEndpoint"
    PERSISTENCE_CLIENT = "PersistenceClient"
    CONFIG_SNAPSHOT = "ConfigSnapshot"


@dataclass(frozen=True)
class GeneratedArtifact:
    """One complete generated file."""

    role: ArtifactRole
    path: str  # Relative to the output directory, posix separators
    content: str


@dataclass(frozen=True)
class SchemaField:
    name: str
    constraints: tuple[CompiledConstraint, ...]


@dataclass(frozen=True)
class PersistenceTarget:
    database: str
    collection: str


# Configuration field blamed when rendering an artifact fails.
_ROLE_FIELDS: dict[ArtifactRole, str] = {
    ArtifactRole.COMPONENT: "fields",
    ArtifactRole.SCHEMA: "fields",
    ArtifactRole.SERVER_HANDLER: "use_server_actions",
    ArtifactRole.HTTP_ENDPOINT: "create_api_route",
    ArtifactRole.PERSISTENCE_CLIENT: "include_database",
    ArtifactRole.CONFIG_SNAPSHOT: "form_name",
}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GenerationError(Exception):
    """Raised when a ``FormSpec`` cannot be turned into a complete artifact batch."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


# ---------------------------------------------------------------------------
# FormGenerator
# ---------------------------------------------------------------------------


class FormGenerator:
    """Builds and writes every artifact for one ``FormSpec``.

    Quick usage::

        generator = FormGenerator(FormSpec.load("ContactConfig.json"))
        artifacts = generator.build()
        await generator.write("./generated-form", artifacts)
    """

    def __init__(self, spec: FormSpec) -> None:
        self.spec = spec
        self.names: FormNames = names_for(spec)
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def build(self) -> list[GeneratedArtifact]:
        """Compose the full artifact batch.

        Raises:
            GenerationError: If the FormSpec violates an invariant or any artifact
                fails to render.  No partial batch is ever returned.
        """
        violations = self.spec.invariant_violations()
        if violations:
            field, message = violations[0]
            raise GenerationError(field, message)

        artifacts = self._assemble()
        self._verify_references(artifacts)
        return artifacts

    async def write(
        self,
        output_dir: str | Path,
        artifacts: Optional[list[GeneratedArtifact]] = None,
    ) -> list[Path]:
        """Write the artifact batch under *output_dir*.

        The batch is built first when not supplied, so a generation failure
        leaves the output directory untouched.

        Returns:
            List of written file paths, in artifact order.
        """
        batch = artifacts if artifacts is not None else self.build()
        root = Path(output_dir)
        written: list[Path] = []
        for artifact in batch:
            out = root / artifact.path
            await asyncio.to_thread(write_file, out, artifact.content)
            written.append(out)
        return written

    def warnings(self) -> list[str]:
        """Non-fatal configuration issues worth reporting to the user."""
        messages: list[str] = []
        for field in self.spec.fields:
            messages.extend(lint_rules(field))
        if self.spec.use_server_actions and self.spec.router_type is RouterType.PAGES:
            messages.append(
                "use_server_actions: server actions require the app router; "
                "the generated action will not run under pages/"
            )
        if (
            self.spec.include_database
            and not self.spec.use_server_actions
            and not self.spec.create_api_route
        ):
            messages.append(
                f"create_api_route: the form posts to {self.names.endpoint_url} "
                "but no API route is generated"
            )
        return messages

    # -- Assembly ----------------------------------------------------------

    def _assemble(self) -> list[GeneratedArtifact]:
        spec, names = self.spec, self.names

        fields = render_fields(spec)
        layout = compose_layout(spec, fields, render_buttons(spec), render_link(spec))
        submission = plan_submission(spec, names)
        schema_fields = [
            SchemaField(name=field.name, constraints=tuple(compile_rules(field)))
            for field in spec.fields
        ]
        persistence = self._persistence_target()

        artifacts = [
            self._render(
                ArtifactRole.COMPONENT,
                names.component_path,
                "component.tsx.j2",
                {
                    "names": names,
                    "layout": layout,
                    "submission": submission,
                    "theme": self._theme(),
                    "uses_input": any(not f.multiline for f in fields),
                    "uses_textarea": any(f.multiline for f in fields),
                    "schema_import": names.import_from(names.component_path, names.schema_path),
                    "action_import": names.import_from(names.component_path, names.action_path),
                },
            ),
            self._render(
                ArtifactRole.SCHEMA,
                names.schema_path,
                "schema.ts.j2",
                {"names": names, "schema_fields": schema_fields},
            ),
        ]

        if spec.use_server_actions:
            artifacts.append(self._render(
                ArtifactRole.SERVER_HANDLER,
                names.action_path,
                "action.ts.j2",
                self._server_context(names.action_path, persistence),
            ))

        if spec.create_api_route:
            template = (
                "route_app.ts.j2"
                if spec.router_type is RouterType.APP
                else "route_pages.ts.j2"
            )
            artifacts.append(self._render(
                ArtifactRole.HTTP_ENDPOINT,
                names.endpoint_path,
                template,
                self._server_context(names.endpoint_path, persistence),
            ))

        if persistence is not None:
            artifacts.append(self._render(
                ArtifactRole.PERSISTENCE_CLIENT,
                names.persistence_path,
                "mongodb.ts.j2",
                {"persistence": persistence, "env_var": MONGODB_URI_ENV},
            ))

        artifacts.append(GeneratedArtifact(
            role=ArtifactRole.CONFIG_SNAPSHOT,
            path=names.snapshot_path,
            content=spec.to_snapshot() + "\n",
        ))
        return artifacts

    def _render(
        self,
        role: ArtifactRole,
        path: str,
        template: str,
        context: dict[str, Any],
    ) -> GeneratedArtifact:
        try:
            content = self.renderer.render(template, context)
        except (TemplateError, AttributeError, TypeError, ValueError) as exc:
            raise GenerationError(
                _ROLE_FIELDS[role], f"failed to render {role.value} ({path}): {exc}"
            ) from exc
        return GeneratedArtifact(role=role, path=path, content=content)

    def _server_context(
        self, importer_path: str, persistence: Optional[PersistenceTarget]
    ) -> dict[str, Any]:
        names = self.names
        return {
            "names": names,
            "persistence": persistence,
            "schema_import": names.import_from(importer_path, names.schema_path),
            "persistence_import": names.import_from(importer_path, names.persistence_path),
        }

    def _persistence_target(self) -> Optional[PersistenceTarget]:
        if not self.spec.include_database:
            return None
        return PersistenceTarget(
            database=self.spec.database_name or "",
            collection=self.spec.collection_name or "",
        )

    def _theme(self) -> Optional[dict[str, str]]:
        if not self.spec.use_custom_colors:
            return None
        return {
            "primary": self.spec.primary_color or "",
            "secondary": self.spec.secondary_color or "",
        }

    # -- Consistency -------------------------------------------------------

    def _verify_references(self, artifacts: list[GeneratedArtifact]) -> None:
        """Check the cross-artifact references a reader of the batch relies on."""
        schema_symbol = self.names.schema_symbol
        persistence = self._persistence_target()
        for artifact in artifacts:
            if artifact.role in (
                ArtifactRole.COMPONENT,
                ArtifactRole.SCHEMA,
                ArtifactRole.SERVER_HANDLER,
                ArtifactRole.HTTP_ENDPOINT,
            ) and schema_symbol not in artifact.content:
                raise GenerationError(
                    "form_name",
                    f"{artifact.role.value} ({artifact.path}) does not reference {schema_symbol}",
                )
            if persistence is not None and artifact.role in (
                ArtifactRole.SERVER_HANDLER,
                ArtifactRole.HTTP_ENDPOINT,
                ArtifactRole.PERSISTENCE_CLIENT,
            ):
                for name in (persistence.database, persistence.collection):
                    if js_string(name) not in artifact.content:
                        raise GenerationError(
                            "include_database",
                            f"{artifact.role.value} ({artifact.path}) does not name {name!r}",
                        )
