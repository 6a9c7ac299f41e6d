"""Tests for key resolution order and error containment."""

import logging
from unittest.mock import Mock

from conftest import press
from docui.exceptions import ClientError, UnknownPanelError
from docui.ui.keybindings.keys import Modifier
from docui.ui.modal_stack import IDLE, ConfirmActive
from docui.ui.panel_ids import CONTAINER_LIST, DETAIL, IMAGE_LIST, NETWORK_LIST


def _snapshot(ctx):
    return (
        ctx.panels.focus,
        ctx.modal.state,
        ctx.message,
        ctx.screen.view(IMAGE_LIST).cursor_row,
        ctx.screen.view(IMAGE_LIST).text,
    )


class TestResolutionOrder:
    def test_unbound_key_is_a_noop(self, ctx, client):
        before = _snapshot(ctx)
        calls = len(client.calls)

        handled = ctx.dispatcher.dispatch(IMAGE_LIST, "z")

        assert handled is False
        assert _snapshot(ctx) == before
        assert len(client.calls) == calls

    def test_panel_binding_shadows_global(self, ctx):
        global_handler = Mock()
        ctx.keybindings.bind_global("d", global_handler, action="global_d")

        ctx.dispatcher.dispatch(IMAGE_LIST, "d")

        global_handler.assert_not_called()
        assert isinstance(ctx.modal.state, ConfirmActive)

    def test_global_binding_is_the_fallback(self, ctx):
        assert ctx.dispatcher.dispatch(IMAGE_LIST, "tab") is True
        assert ctx.panels.current == CONTAINER_LIST

    def test_shift_tab_goes_back_and_wraps(self, ctx):
        press(ctx, "shift+tab")
        assert ctx.panels.current == DETAIL
        press(ctx, "shift+tab")
        assert ctx.panels.current == NETWORK_LIST

    def test_tab_visits_every_persistent_panel(self, ctx):
        seen = [ctx.panels.current]
        for _ in range(5):
            press(ctx, "tab")
            seen.append(ctx.panels.current)
        assert seen == ["images", "containers", "volumes", "networks", "detail", "images"]

    def test_quit_keys_request_exit(self, ctx):
        on_exit = Mock()
        ctx._on_exit = on_exit
        press(ctx, "q")
        press(ctx, "ctrl+c")
        assert on_exit.call_count == 2

    def test_overlay_takes_keys_aimed_at_other_panels(self, ctx):
        ctx.modal.open_confirm("Really?", Mock())
        ctx.dispatcher.dispatch(CONTAINER_LIST, "tab")
        assert isinstance(ctx.modal.state, ConfirmActive)

    def test_alt_modifier_is_distinct(self, ctx):
        plain, alt = Mock(), Mock()
        ctx.keybindings.bind(IMAGE_LIST, "x", plain, action="plain_x")
        ctx.keybindings.bind(IMAGE_LIST, "x", alt, Modifier.ALT, action="alt_x")

        press(ctx, "alt+x")

        alt.assert_called_once()
        plain.assert_not_called()

    def test_handler_shared_between_panels(self, ctx):
        press(ctx, "j")
        assert ctx.screen.view(IMAGE_LIST).cursor_row == 2
        press(ctx, "tab", "tab", "tab", "tab")
        assert ctx.panels.current == DETAIL
        before = ctx.screen.view(IMAGE_LIST).cursor_row
        press(ctx, "k")
        assert ctx.screen.view(IMAGE_LIST).cursor_row == before


class TestErrorContainment:
    def test_client_error_becomes_message_on_focused_panel(self, ctx):
        ctx.keybindings.bind(IMAGE_LIST, "x", Mock(side_effect=ClientError("daemon not running")))

        assert ctx.dispatcher.dispatch(IMAGE_LIST, "x") is True
        assert ctx.message_for(IMAGE_LIST).text == "daemon not running"
        assert ctx.message.level == "error"

    def test_invariant_violation_is_logged_and_shown(self, ctx, caplog):
        ctx.keybindings.bind(IMAGE_LIST, "x", Mock(side_effect=UnknownPanelError("ghost")))

        with caplog.at_level(logging.ERROR, logger="docui"):
            ctx.dispatcher.dispatch(IMAGE_LIST, "x")

        assert "Unknown panel" in ctx.message_for(IMAGE_LIST).text
        assert any(r.levelno == logging.ERROR and r.exc_info for r in caplog.records)

    def test_unexpected_exception_is_contained(self, ctx, caplog):
        ctx.keybindings.bind(IMAGE_LIST, "x", Mock(side_effect=RuntimeError("boom")))

        with caplog.at_level(logging.ERROR, logger="docui"):
            ctx.dispatcher.dispatch(IMAGE_LIST, "x")

        assert ctx.message_for(IMAGE_LIST).text == "Unexpected error: boom"
        assert any("crashed" in r.getMessage() for r in caplog.records)

    def test_dispatch_keeps_working_after_an_error(self, ctx):
        ctx.keybindings.bind(IMAGE_LIST, "x", Mock(side_effect=RuntimeError("boom")))
        press(ctx, "x", "tab")
        assert ctx.panels.current == CONTAINER_LIST

    def test_message_cleared_by_next_key(self, ctx):
        ctx.flash("something failed", panel_id=IMAGE_LIST)
        press(ctx, "z")
        assert ctx.message is None
        assert ctx.modal.state is IDLE
