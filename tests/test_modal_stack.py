"""Tests for the overlay slot: confirmations and input forms."""

from unittest.mock import Mock

import pytest

from conftest import press, type_text
from docui.exceptions import ClientError, OverlayBusyError, UnknownCommandError
from docui.ui.commands import Command
from docui.ui.modal_stack import IDLE, ConfirmActive, InputActive
from docui.ui.panel_ids import CONTAINER_LIST, IMAGE_LIST
from docui.ui.panels import CONFIRM_PANEL, INPUT_PANEL, ConfirmPanel, FormField, InputForm


def _form(command_id="echo", required=False, aux=None):
    return InputForm(
        title="Echo",
        fields=[FormField("Name", required=required), FormField("Tag")],
        command_id=command_id,
        aux_data=aux or {},
    )


class TestConfirm:
    def test_open_records_focus_and_takes_it(self, ctx):
        ctx.panels.set_current(CONTAINER_LIST)
        panel = ctx.modal.open_confirm("Really?", Mock())

        state = ctx.modal.state
        assert isinstance(state, ConfirmActive)
        assert state.panel is panel
        assert state.restore == CONTAINER_LIST
        assert ctx.panels.current == CONFIRM_PANEL
        assert ctx.panels.previous == CONTAINER_LIST
        assert ctx.screen.focused == CONFIRM_PANEL
        assert ctx.screen.view(CONFIRM_PANEL).text == "Really?"

    def test_second_overlay_raises_and_first_is_untouched(self, ctx):
        first = ctx.modal.open_confirm("First?", Mock())
        state = ctx.modal.state

        with pytest.raises(OverlayBusyError):
            ctx.modal.open_confirm("Second?", Mock())
        with pytest.raises(OverlayBusyError):
            ctx.modal.open_input(_form())

        assert ctx.modal.state is state
        assert ctx.modal.overlay is first
        assert ctx.screen.view(CONFIRM_PANEL).text == "First?"
        assert ctx.screen.get(INPUT_PANEL) is None

    def test_accept_restores_focus_then_runs_callback(self, ctx):
        seen = {}

        def on_accept():
            seen["focus"] = ctx.panels.current
            seen["state"] = ctx.modal.state

        ctx.modal.open_confirm("Really?", on_accept)
        press(ctx, "y")

        assert seen == {"focus": IMAGE_LIST, "state": IDLE}
        assert ctx.panels.current == IMAGE_LIST
        assert ctx.screen.focused == IMAGE_LIST
        assert ctx.screen.get(CONFIRM_PANEL) is None
        assert CONFIRM_PANEL not in ctx.panels

    def test_uppercase_y_accepts(self, ctx):
        on_accept = Mock()
        ctx.modal.open_confirm("Really?", on_accept)
        press(ctx, "Y")
        on_accept.assert_called_once()

    @pytest.mark.parametrize("key", ["n", "N", "escape"])
    def test_reject_restores_focus(self, ctx, key):
        on_accept, on_reject = Mock(), Mock()
        ctx.modal.open_confirm("Really?", on_accept, on_reject)
        press(ctx, key)

        on_accept.assert_not_called()
        on_reject.assert_called_once()
        assert ctx.modal.state is IDLE
        assert ctx.panels.current == IMAGE_LIST

    def test_other_keys_are_swallowed(self, ctx):
        on_accept = Mock()
        ctx.modal.open_confirm("Really?", on_accept)
        press(ctx, "tab", "j", "q", "enter")

        assert isinstance(ctx.modal.state, ConfirmActive)
        assert ctx.panels.current == CONFIRM_PANEL
        on_accept.assert_not_called()

    @pytest.mark.parametrize("key", ["alt+y", "alt+Y", "alt+n", "alt+N"])
    def test_modified_answer_keys_are_swallowed(self, ctx, key):
        on_accept, on_reject = Mock(), Mock()
        ctx.modal.open_confirm("Really?", on_accept, on_reject)
        press(ctx, key)

        assert isinstance(ctx.modal.state, ConfirmActive)
        assert ctx.panels.current == CONFIRM_PANEL
        on_accept.assert_not_called()
        on_reject.assert_not_called()

    def test_alt_y_does_not_remove_image(self, ctx, client):
        press(ctx, "d", "alt+y")
        assert isinstance(ctx.modal.state, ConfirmActive)
        assert client.calls_to("remove_image") == []
        press(ctx, "y")
        assert len(client.calls_to("remove_image")) == 1

    def test_failed_initialize_leaves_slot_reusable(self, ctx, monkeypatch):
        def broken(self):
            raise RuntimeError("no room for the overlay")

        monkeypatch.setattr(ConfirmPanel, "initialize", broken)
        with pytest.raises(RuntimeError):
            ctx.modal.open_confirm("Really?", Mock())
        assert ctx.modal.state is IDLE
        assert CONFIRM_PANEL not in ctx.panels
        assert ctx.panels.current == IMAGE_LIST

        monkeypatch.undo()
        ctx.modal.open_confirm("Really?", Mock())
        assert isinstance(ctx.modal.state, ConfirmActive)

    def test_failed_accept_is_shown_on_restored_panel(self, ctx):
        def on_accept():
            raise ClientError("conflict: image is in use")

        ctx.modal.open_confirm("Really?", on_accept)
        press(ctx, "y")

        assert ctx.modal.state is IDLE
        assert ctx.panels.current == IMAGE_LIST
        assert ctx.message_for(IMAGE_LIST).text == "conflict: image is in use"

    def test_close_when_idle_is_noop(self, ctx):
        ctx.modal.close()
        assert ctx.modal.state is IDLE
        assert ctx.panels.current == IMAGE_LIST

    def test_overlay_view_is_centered(self, ctx):
        ctx.modal.open_confirm("Really?", Mock())
        pos = ctx.screen.view(CONFIRM_PANEL).position
        width, height = ctx.screen.size
        assert pos.width == len("Really?") + 4
        assert abs((pos.left + pos.right) // 2 - width // 2) <= 1
        assert abs((pos.top + pos.bottom) // 2 - height // 2) <= 1


class TestInput:
    def test_submit_runs_command_with_merged_params(self, ctx):
        func = Mock()
        ctx.register_command(Command("echo", func, success="Echoed {Name}"))
        ctx.modal.open_input(_form(aux={"Image": "nginx:latest"}))
        assert isinstance(ctx.modal.state, InputActive)

        type_text(ctx, "web")
        press(ctx, "tab")
        type_text(ctx, "v1")
        press(ctx, "enter")

        func.assert_called_once_with({"Name": "web", "Tag": "v1", "Image": "nginx:latest"})
        assert ctx.modal.state is IDLE
        assert ctx.panels.current == IMAGE_LIST
        assert ctx.message_for(IMAGE_LIST).text == "Echoed web"

    def test_missing_required_field_keeps_form_open(self, ctx):
        func = Mock()
        ctx.register_command(Command("echo", func))
        panel = ctx.modal.open_input(_form(required=True))
        press(ctx, "tab", "enter")

        func.assert_not_called()
        assert ctx.modal.overlay is panel
        assert panel.error == "Required: Name"
        assert panel.index == 0
        assert "Required: Name" in ctx.screen.view(INPUT_PANEL).text

    def test_escape_cancels_without_running(self, ctx):
        func = Mock()
        ctx.register_command(Command("echo", func))
        ctx.modal.open_input(_form())
        type_text(ctx, "abc")
        press(ctx, "escape")

        func.assert_not_called()
        assert ctx.modal.state is IDLE
        assert ctx.panels.current == IMAGE_LIST
        assert ctx.screen.get(INPUT_PANEL) is None

    def test_command_failure_closes_form_and_flashes(self, ctx):
        ctx.register_command(Command("echo", Mock(side_effect=ClientError("pull access denied"))))
        ctx.modal.open_input(_form())
        type_text(ctx, "x")
        press(ctx, "enter")

        assert ctx.modal.state is IDLE
        assert ctx.message_for(IMAGE_LIST).text == "pull access denied"

    def test_unknown_command_closes_first_then_raises(self, ctx):
        ctx.modal.open_input(_form(command_id="nobody"))
        with pytest.raises(UnknownCommandError):
            ctx.modal.submit()
        assert ctx.modal.state is IDLE
        assert ctx.panels.current == IMAGE_LIST

    def test_unknown_command_via_keys_is_contained(self, ctx):
        ctx.modal.open_input(_form(command_id="nobody"))
        press(ctx, "enter")
        assert ctx.modal.state is IDLE
        assert "Unknown command" in ctx.message_for(IMAGE_LIST).text

    def test_global_keys_do_not_leak_into_form(self, ctx):
        on_exit = Mock()
        ctx._on_exit = on_exit
        panel = ctx.modal.open_input(_form())
        type_text(ctx, "q")
        press(ctx, "tab")

        on_exit.assert_not_called()
        assert panel.form.fields[0].value == "q"
        assert panel.index == 1
        assert ctx.panels.current == INPUT_PANEL


class TestRoutingHelpers:
    def test_handle_key_when_idle_returns_false(self, ctx):
        from docui.ui.keybindings.keys import KeyEvent, Modifier

        event = KeyEvent("y", Modifier.NONE, IMAGE_LIST, ctx, "y")
        assert ctx.modal.handle_key(event) is False

    def test_accept_reject_submit_ignore_wrong_state(self, ctx):
        ctx.modal.accept()
        ctx.modal.reject()
        ctx.modal.submit()
        ctx.modal.cancel()
        assert ctx.modal.state is IDLE

        ctx.modal.open_input(_form())
        ctx.modal.accept()
        ctx.modal.reject()
        assert isinstance(ctx.modal.state, InputActive)
