"""Unit tests for field, button and link fragments (formforge.scaffolder.fragments)."""

from __future__ import annotations

import pytest

from formforge.models import ButtonSpec, ButtonVariant, FieldSpec, FieldType
from formforge.scaffolder.fragments import (
    SUBMITTING_LABEL,
    render_button,
    render_buttons,
    render_field,
    render_fields,
    render_link,
)

pytestmark = pytest.mark.unit


class TestRenderField:
    def test_text_field_uses_input(self):
        fragment = render_field(FieldSpec(name="name", label="Name", placeholder="Jane"))
        assert fragment.control == "Input"
        assert fragment.input_type == "text"
        assert fragment.placeholder == "Jane"
        assert not fragment.multiline

    def test_textarea_field(self):
        fragment = render_field(FieldSpec(name="bio", label="Bio", type=FieldType.TEXTAREA))
        assert fragment.control == "Textarea"
        assert fragment.multiline

    @pytest.mark.parametrize("field_type", ["email", "password", "number"])
    def test_typed_inputs(self, field_type):
        fragment = render_field(FieldSpec(name="x", label="X", type=field_type))
        assert fragment.control == "Input"
        assert fragment.input_type == field_type

    def test_render_fields_keeps_order(self, signup_spec):
        assert [f.name for f in render_fields(signup_spec)] == ["username", "email", "age", "bio"]


class TestRenderButton:
    def test_submit_button_tracks_loading(self):
        button = ButtonSpec(name="Send")
        fragment = render_button(button, 1, submit_index=1, loading_state=True)
        assert fragment.submit
        assert fragment.html_type == "submit"
        assert fragment.tracks_loading
        assert fragment.busy_label == SUBMITTING_LABEL

    def test_submit_button_without_loading(self):
        fragment = render_button(ButtonSpec(name="Send"), 1, submit_index=1, loading_state=False)
        assert fragment.submit
        assert not fragment.tracks_loading
        assert fragment.busy_label is None

    def test_other_button_is_plain(self):
        button = ButtonSpec(name="Cancel", variant=ButtonVariant.OUTLINE)
        fragment = render_button(button, 1, submit_index=2, loading_state=True)
        assert fragment.html_type == "button"
        assert fragment.variant == "outline"
        assert not fragment.tracks_loading

    def test_render_buttons_marks_exactly_one_submit(self, signup_spec):
        fragments = render_buttons(signup_spec)
        assert [b.submit for b in fragments] == [False, True]
        assert [b.label for b in fragments] == ["Cancel", "Create account"]


class TestRenderLink:
    def test_no_link(self, contact_spec):
        assert render_link(contact_spec) is None

    def test_link(self, signup_spec):
        link = render_link(signup_spec)
        assert link.text == "Already registered?"
        assert link.href == "/login"
