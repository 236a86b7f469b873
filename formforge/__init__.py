"""formforge -- scaffolds Next.js form feature slices from a form description.

The interactive flow (``formforge.prompts``) or a saved JSON snapshot yields a
``FormSpec``; ``formforge.scaffolder.FormGenerator`` turns it into the
component, zod schema, server action, API route and MongoDB client sources.
"""

__version__ = "0.3.0"
