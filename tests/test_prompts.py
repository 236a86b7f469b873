"""Unit tests for the interactive question flow (formforge.prompts).

Rich prompt classes are patched with scripted answers in question order.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from formforge.models import ButtonVariant, FieldType, RouterType
from formforge.prompts import collect_form_spec

pytestmark = pytest.mark.unit


def _run(text: list[str], ints: list[int], confirms: list[bool]):
    with (
        patch("formforge.prompts.Prompt.ask", side_effect=text) as prompt_ask,
        patch("formforge.prompts.IntPrompt.ask", side_effect=ints),
        patch("formforge.prompts.Confirm.ask", side_effect=confirms),
        patch("formforge.prompts.console"),
    ):
        spec = collect_form_spec()
    return spec, prompt_ask


class TestCollectFormSpec:
    def test_minimal_flow(self):
        spec, _ = _run(
            text=[
                "Contact",                      # form name
                "app",                          # router
                "Default", "Center", "Center",  # style, alignment
                "w-full max-w-md",              # width
                "Thanks!", "Oops",              # success / error message
                "email", "Email", "", "email", "required", "",  # field 1
                "Send", "default",              # button 1
            ],
            ints=[1, 1, 1],
            confirms=[False, True, False, True, True, False],
        )
        assert spec.form_name == "Contact"
        assert spec.router_type is RouterType.APP
        assert spec.use_server_actions is True
        assert spec.create_api_route is False
        assert spec.fields[0].type is FieldType.EMAIL
        assert spec.fields[0].validation == "required"
        assert spec.buttons[0].variant is ButtonVariant.DEFAULT
        assert spec.success_message == "Thanks!"

    def test_full_flow_with_follow_ups(self):
        spec, _ = _run(
            text=[
                "Signup",
                "Already registered?", "/login",   # link
                "pages",
                "Card", "Left", "Top", "w-full",
                "#112233", "#aabbcc",              # colors
                "Welcome", "Failed",
                "acme", "signups",                 # database
                "name", "Name", "Jane", "text", "required,min:2", "",
                "bio", "Bio", "", "textarea", "max:200", "Too long",
                "Cancel", "outline",
                "Create", "default",
            ],
            ints=[2, 2, 2],
            confirms=[True, True, True, True, False, True],
        )
        assert spec.add_link and spec.link_href == "/login"
        assert spec.router_type is RouterType.PAGES
        assert spec.use_server_actions is False
        assert spec.create_api_route is True
        assert spec.primary_color == "#112233"
        assert spec.add_error_handling is False
        assert spec.database_name == "acme"
        assert [f.name for f in spec.fields] == ["name", "bio"]
        assert spec.fields[1].error_message == "Too long"
        assert spec.submit_button_index == 2

    def test_invalid_answers_are_asked_again(self):
        spec, prompt_ask = _run(
            text=[
                "1bad", "Contact",              # first name is rejected
                "app",
                "Default", "Center", "Center", "w-full",
                "Thanks!", "Oops",
                "email", "Email", "", "email", "", "",
                "Send", "default",
            ],
            ints=[1, 1, 3, 1],                  # submit index 3 is out of range
            confirms=[False, True, False, True, True, False],
        )
        assert spec.form_name == "Contact"
        assert spec.submit_button_index == 1
        assert prompt_ask.call_count == 17

    def test_duplicate_field_name_is_rejected(self):
        spec, _ = _run(
            text=[
                "Contact",
                "app",
                "Default", "Center", "Center", "w-full",
                "Thanks!", "Oops",
                "email", "Email", "", "email", "", "",
                "email", "email2", "Backup", "", "email", "", "",
                "Send", "default",
            ],
            ints=[2, 1, 1],
            confirms=[False, True, False, True, True, False],
        )
        assert [f.name for f in spec.fields] == ["email", "email2"]
