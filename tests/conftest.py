"""Shared pytest fixtures for the formforge test suite.

Provides reusable fixtures for:
- Raw snapshot payloads in the camelCase format written by the tool
- Ready-made ``FormSpec`` instances (minimal contact form, full-featured form)
- A factory for building specs with per-test overrides
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from formforge.models import FormSpec


# ---------------------------------------------------------------------------
# Raw payloads
# ---------------------------------------------------------------------------

@pytest.fixture
def contact_payload() -> dict[str, Any]:
    """Minimal contact form: one email field, one button, no server side."""
    return {
        "formName": "Contact",
        "inputFields": [
            {
                "name": "email",
                "label": "Email",
                "placeholder": "you@example.com",
                "type": "email",
                "validation": "required",
                "errorMessage": "",
            },
        ],
        "buttons": [{"name": "Send", "variant": "default"}],
        "submitButtonIndex": 1,
        "formStyle": "Default",
        "routerType": "app",
        "useServerActions": False,
        "createApiRoute": False,
        "includeDatabase": False,
    }


@pytest.fixture
def signup_payload() -> dict[str, Any]:
    """Full-featured form exercising every optional artifact."""
    return {
        "formName": "Signup",
        "inputCount": 4,
        "buttonCount": 2,
        "inputFields": [
            {"name": "username", "label": "Username", "placeholder": "jane",
             "type": "text", "validation": "required,min:3,max:20", "errorMessage": ""},
            {"name": "email", "label": "Email", "placeholder": "",
             "type": "email", "validation": "required", "errorMessage": ""},
            {"name": "age", "label": "Age", "placeholder": "",
             "type": "number", "validation": "required", "errorMessage": ""},
            {"name": "bio", "label": "About you", "placeholder": "A few words",
             "type": "textarea", "validation": "max:200", "errorMessage": "Too long"},
        ],
        "buttons": [
            {"name": "Cancel", "variant": "outline"},
            {"name": "Create account", "variant": "default"},
        ],
        "submitButtonIndex": 2,
        "addLink": True,
        "linkText": "Already registered?",
        "linkHref": "/login",
        "routerType": "app",
        "useServerActions": True,
        "createApiRoute": True,
        "useTypeScript": True,
        "formStyle": "Card",
        "horizontalAlignment": "Left",
        "verticalAlignment": "Top",
        "formWidth": "w-full max-w-lg",
        "useCustomColors": True,
        "primaryColor": "#112233",
        "secondaryColor": "#aabbcc",
        "addLoadingState": True,
        "addErrorHandling": True,
        "successMessage": "Welcome aboard!",
        "errorMessage": "Signup failed.",
        "includeDatabase": True,
        "databaseName": "acme_prod",
        "collectionName": "signups",
    }


# ---------------------------------------------------------------------------
# Specs
# ---------------------------------------------------------------------------

@pytest.fixture
def contact_spec(contact_payload) -> FormSpec:
    return FormSpec.model_validate(contact_payload)


@pytest.fixture
def signup_spec(signup_payload) -> FormSpec:
    return FormSpec.model_validate(signup_payload)


@pytest.fixture
def make_spec(contact_payload) -> Callable[..., FormSpec]:
    """Build a ``FormSpec`` from the contact payload plus camelCase overrides."""

    def _make(**overrides: Any) -> FormSpec:
        return FormSpec.model_validate({**contact_payload, **overrides})

    return _make


@pytest.fixture
def snapshot_file(tmp_path: Path, signup_payload) -> Path:
    """The full-featured payload written as a snapshot on disk."""
    path = tmp_path / "SignupConfig.json"
    path.write_text(json.dumps(signup_payload, indent=2), encoding="utf-8")
    return path
