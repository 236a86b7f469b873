"""formforge scaffolder -- turns a ``FormSpec`` into Next.js form sources.

Quick usage::

    from formforge.models import FormSpec
    from formforge.scaffolder import FormGenerator

    generator = FormGenerator(FormSpec.load("ContactConfig.json"))
    artifacts = generator.build()
    paths = await generator.write("./generated-form", artifacts)
"""

from formforge.scaffolder.generator import (
    ArtifactRole,
    FormGenerator,
    GeneratedArtifact,
    GenerationError,
)
from formforge.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArtifactRole",
    "FormGenerator",
    "GeneratedArtifact",
    "GenerationError",
    "TemplateRenderer",
]
