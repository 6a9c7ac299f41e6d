"""Unit tests for InputForm / InputPanel editing."""

import pytest

from conftest import press, type_text
from docui.ui.panels import INPUT_PANEL, FormField, InputForm, InputPanel
from docui.ui.panels.forms import CREATE_VOLUME, create_container_form, create_volume_form


class TestFormField:
    def test_key_defaults_to_label(self):
        assert FormField("Name").key == "Name"

    def test_custom_key(self):
        assert FormField("Host port", key="HostPort").key == "HostPort"


class TestInputForm:
    def test_values_are_stripped_and_aux_wins(self):
        form = InputForm(
            title="t",
            fields=[FormField("Name", value="  web "), FormField("Image", value="ignored")],
            command_id="x",
            aux_data={"Image": "nginx"},
        )
        assert form.values() == {"Name": "web", "Image": "nginx"}

    def test_missing_lists_blank_required_fields(self):
        form = InputForm(
            title="t",
            fields=[FormField("A", required=True, value=" "), FormField("B"), FormField("C", required=True)],
            command_id="x",
        )
        assert form.missing() == ["A", "C"]

    def test_builtin_forms(self):
        form = create_container_form("nginx:latest")
        assert form.aux_data == {"Image": "nginx:latest"}
        assert [f.label for f in form.fields][:3] == ["Name", "HostPort", "Port"]

        volume = create_volume_form()
        assert volume.command_id == CREATE_VOLUME
        assert volume.values()["Driver"] == "local"


class TestInputPanel:
    @pytest.fixture
    def panel(self, ctx):
        form = InputForm(
            title="Edit",
            fields=[FormField("Name", required=True), FormField("Tag", value="latest")],
            command_id="edit",
        )
        return ctx.modal.open_input(form)

    def test_form_without_fields_is_rejected(self, ctx):
        with pytest.raises(ValueError):
            InputPanel(ctx, InputForm(title="empty", fields=[], command_id="x"))

    def test_typing_inserts_at_caret(self, ctx, panel):
        type_text(ctx, "wb")
        press(ctx, "left")
        type_text(ctx, "e")
        assert panel.form.fields[0].value == "web"
        assert panel.caret == 2

    def test_home_end_and_deletes(self, ctx, panel):
        type_text(ctx, "abcd")
        press(ctx, "home", "delete")
        assert panel.form.fields[0].value == "bcd"
        press(ctx, "end", "backspace")
        assert panel.form.fields[0].value == "bc"
        press(ctx, "home", "backspace")
        assert panel.form.fields[0].value == "bc"

    def test_caret_stays_in_bounds(self, ctx, panel):
        type_text(ctx, "ab")
        press(ctx, "right", "right")
        assert panel.caret == 2
        press(ctx, "left", "left", "left")
        assert panel.caret == 0

    def test_field_navigation_wraps(self, ctx, panel):
        press(ctx, "tab")
        assert panel.index == 1
        assert panel.caret == len("latest")
        press(ctx, "down")
        assert panel.index == 0
        press(ctx, "shift+tab")
        assert panel.index == 1
        press(ctx, "up")
        assert panel.index == 0

    def test_non_printable_keys_are_ignored(self, ctx, panel):
        press(ctx, "ctrl+r", "f5")
        assert panel.form.fields[0].value == ""

    def test_render_marks_focus_and_required(self, ctx, panel):
        type_text(ctx, "web")
        lines = ctx.screen.view(INPUT_PANEL).lines
        assert lines[0] == ">*Name : web"
        assert lines[1] == "  Tag  : latest"
        assert lines[-1].startswith("enter: submit")

    def test_caret_column_follows_label_width(self, ctx, panel):
        type_text(ctx, "we")
        assert panel.caret_column == 2 + 4 + 3 + 2

    def test_view_title_is_form_title(self, ctx, panel):
        assert ctx.screen.view(INPUT_PANEL).title == "Edit"
