"""Tests for TUI pieces: ansi helpers, Component, TreeView, StatusLine, TUIRenderer."""

from __future__ import annotations

from io import StringIO

from session_picker.tree import Row, SessionTree
from session_picker.tui.ansi import (
    CLEAR_SCREEN,
    FG,
    RESET,
    SELECTED,
    Style,
    move_to,
    strip_ansi,
    truncate,
)
from session_picker.tui.component import Component
from session_picker.tui.renderer import TUIRenderer, diff_frames
from session_picker.tui.tree_view import StatusLine, TreeView, format_row


# ---------------------------------------------------------------------------
# Concrete subclass for testing the abstract Component
# ---------------------------------------------------------------------------


class StubComponent(Component):
    """Minimal concrete component for testing the base class."""

    def __init__(self, lines: list[str] | None = None) -> None:
        super().__init__()
        self._lines = lines or ["stub"]
        self.render_calls = 0

    def render(self, width: int, height: int) -> list[str]:
        self.render_calls += 1
        return list(self._lines)


# ---------------------------------------------------------------------------
# ansi
# ---------------------------------------------------------------------------


class TestAnsi:
    """Tests for the ANSI helpers."""

    def test_style_wraps_and_resets(self) -> None:
        text = Style(fg=FG.CYAN, bold=True)("hi")

        assert text.startswith(FG.CYAN)
        assert text.endswith(RESET)
        assert strip_ansi(text) == "hi"

    def test_empty_style_leaves_text_unchanged(self) -> None:
        assert Style()("plain") == "plain"
        assert Style().prefix == ""

    def test_selected_style_is_reverse_video(self) -> None:
        assert "\x1b[7m" in SELECTED.prefix
        assert FG.CYAN in SELECTED.prefix

    def test_move_to(self) -> None:
        assert move_to(3, 1) == "\x1b[3;1H"

    def test_strip_ansi_removes_private_modes(self) -> None:
        assert strip_ansi("\x1b[?25lhello\x1b[0m") == "hello"

    def test_truncate(self) -> None:
        assert truncate("session", 10) == "session"
        assert truncate("session", 4) == "ses…"
        assert truncate("session", 0) == ""


# ---------------------------------------------------------------------------
# Component
# ---------------------------------------------------------------------------


class TestComponent:
    """Tests for the abstract Component base class."""

    def test_initial_dirty_state(self) -> None:
        assert StubComponent().dirty is True

    def test_draw_clears_dirty(self) -> None:
        comp = StubComponent()
        comp.draw(80, 10)

        assert comp.dirty is False

    def test_draw_clips_to_height(self) -> None:
        comp = StubComponent(["a", "b", "c"])

        assert comp.draw(80, 2) == ["a", "b"]

    def test_hidden_component_draws_nothing(self) -> None:
        comp = StubComponent()
        comp.visible = False

        assert comp.draw(80, 10) == []
        assert comp.render_calls == 0
        assert comp.dirty is False

    def test_zero_height_draws_nothing(self) -> None:
        comp = StubComponent()

        assert comp.draw(80, 0) == []
        assert comp.render_calls == 0

    def test_invalidate_marks_dirty(self) -> None:
        comp = StubComponent()
        comp.draw(80, 10)
        comp.invalidate()

        assert comp.dirty is True

    def test_visible_setter_marks_dirty(self) -> None:
        comp = StubComponent()
        comp.draw(80, 10)
        comp.visible = False

        assert comp.visible is False
        assert comp.dirty is True

    def test_visible_setter_same_value_does_not_mark_dirty(self) -> None:
        comp = StubComponent()
        comp.draw(80, 10)
        comp.visible = True

        assert comp.dirty is False


# ---------------------------------------------------------------------------
# TreeView
# ---------------------------------------------------------------------------


class TestTreeView:
    """Tests for TreeView."""

    def test_loading_placeholder(self) -> None:
        lines = TreeView().render(40, 5)

        assert strip_ansi(lines[0]).strip() == "loading sessions…"

    def test_empty_tree_placeholder(self, actions) -> None:
        view = TreeView(SessionTree.from_sessions([], actions))

        assert strip_ansi(view.render(40, 5)[0]).strip() == "(no sessions)"

    def test_zero_height_renders_nothing(self) -> None:
        assert TreeView().draw(40, 0) == []

    def test_rows_indented_by_depth(self, nested_tree: SessionTree) -> None:
        nested_tree.expand(0)
        nested_tree.expand(1)
        view = TreeView(nested_tree)

        plain = [strip_ansi(line) for line in view.render(80, 20)]

        assert plain[:4] == [
            "(0) work (attached)",
            "  (1) editor (active)",
            "    (2) 0: vim",
            "    (3) 1: zsh",
        ]

    def test_render_respects_height(self, nested_tree: SessionTree) -> None:
        for node in nested_tree.nodes:
            nested_tree.expand(node.index)

        assert len(TreeView(nested_tree).render(80, 4)) == 4

    def test_render_rebuilds_quick_select(self, nested_tree: SessionTree) -> None:
        TreeView(nested_tree).render(80, 10)

        assert nested_tree.quick_select == [0, 6]

    def test_swapping_tree_invalidates(self, nested_tree: SessionTree) -> None:
        view = TreeView()
        view.draw(80, 10)

        view.tree = nested_tree

        assert view.dirty is True
        assert view.tree is nested_tree

    def test_format_row_highlights_selection(self) -> None:
        selected = format_row(Row(text="(0) a", indent=0, selected=True), 80)
        plain = format_row(Row(text="(1) b", indent=1), 80)

        assert selected.startswith(SELECTED.prefix)
        assert plain == "  (1) b"

    def test_format_row_truncates(self) -> None:
        line = format_row(Row(text="(1) a-very-long-tab-name", indent=1), 10)

        assert strip_ansi(line) == "  (1) a-v…"


class TestStatusLine:
    """Tests for StatusLine."""

    def test_renders_text(self) -> None:
        line = StatusLine("Pick a session").render(40, 1)

        assert strip_ansi(line[0]) == "Pick a session"

    def test_empty_text_renders_blank_line(self) -> None:
        assert StatusLine().render(40, 1) == [""]

    def test_setter_only_invalidates_on_change(self) -> None:
        status = StatusLine("x")
        status.draw(40, 1)

        status.text = "x"
        assert status.dirty is False
        status.text = "y"
        assert status.dirty is True


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------


class TestDiffFrames:
    """Tests for diff_frames."""

    def test_identical_frames(self) -> None:
        assert diff_frames(["a", "b"], ["a", "b"]) == []

    def test_changed_rows_are_one_based(self) -> None:
        assert diff_frames(["a", "b", "c"], ["a", "B", "c"]) == [(2, "B")]

    def test_shorter_new_frame_clears_rows(self) -> None:
        assert diff_frames(["a", "b"], ["a"]) == [(2, "")]


class TestTUIRenderer:
    """Tests for TUIRenderer."""

    def test_first_frame_is_full_redraw(self) -> None:
        out = StringIO()
        renderer = TUIRenderer(out)

        renderer.render(["one", "two"], 20, 3)

        written = out.getvalue()
        assert CLEAR_SCREEN in written
        assert "one" in written and "two" in written
        assert move_to(3, 1) in written

    def test_second_frame_writes_only_changes(self) -> None:
        out = StringIO()
        renderer = TUIRenderer(out)
        renderer.render(["one", "two"], 20, 2)
        out.truncate(0)
        out.seek(0)

        renderer.render(["one", "TWO"], 20, 2)

        written = out.getvalue()
        assert "TWO" in written
        assert "one" not in written
        assert CLEAR_SCREEN not in written

    def test_unchanged_frame_writes_nothing(self) -> None:
        out = StringIO()
        renderer = TUIRenderer(out)
        renderer.render(["one"], 20, 1)
        out.truncate(0)
        out.seek(0)

        renderer.render(["one"], 20, 1)

        assert out.getvalue() == ""

    def test_resize_forces_full_redraw(self) -> None:
        out = StringIO()
        renderer = TUIRenderer(out)
        renderer.render(["one"], 20, 1)
        out.truncate(0)
        out.seek(0)

        renderer.render(["one"], 30, 1)

        assert CLEAR_SCREEN in out.getvalue()
