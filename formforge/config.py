"""formforge run configuration.

Settings that control a scaffolding run rather than the form itself.  Like the
rest of the package they are a Pydantic v2 model, so values coming from the
environment or the CLI are validated at construction time.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


class ScaffoldConfig(BaseModel):
    """Where and how generated artifacts are written."""

    output_dir: Path = Field(
        default=Path("./generated-form"),
        description="Directory the artifact paths are resolved against",
    )
    dry_run: bool = Field(
        default=False,
        description="Build the artifact batch and report it without writing",
    )

    @property
    def output_path(self) -> Path:
        return self.output_dir.expanduser()

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            FORMFORGE_OUTPUT_DIR, FORMFORGE_DRY_RUN.
        """
        return cls(
            output_dir=Path(os.environ.get("FORMFORGE_OUTPUT_DIR", "./generated-form")),
            dry_run=os.environ.get("FORMFORGE_DRY_RUN", "").strip().lower() in _TRUTHY,
        )
