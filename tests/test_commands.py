# tests/test_commands.py

from __future__ import annotations

from todo_engine.cli.commands import CommandRegistry, registry, resolve_ref
from todo_engine.connectors.console_connector import handle_line
from todo_engine.core.codec import decode
from todo_engine.core.models import TodoFilter


def _titles(session) -> list[str]:
    return [t.title for t in session.state.todos]


def test_command_registry_routes_2_and_3_params(session) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(session, args):
        called["h2"] += 1
        return "h2"

    def h3(session, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    notes: list[str] = []
    assert reg.handle(session, "/a x") == "h2"
    assert reg.handle(session, "/BEE y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(session) -> None:
    assert registry.handle(session, "hello") is None
    assert "Unknown command" in (registry.handle(session, "/nope") or "")
    assert "Empty command" in (registry.handle(session, "/") or "")
    assert "/filter" in (registry.handle(session, "/help") or "")


def test_plain_text_adds_and_announces(session, kv) -> None:
    out = handle_line(session, "  Buy milk ")
    handle_line(session, "Walk dog")

    assert _titles(session) == ["Walk dog", "Buy milk"]
    assert session.announcer.message == "Added task: Walk dog"
    assert "Buy milk" in (out or "")
    assert decode(kv.read("test.todo")) == session.state


def test_blank_plain_line_is_ignored(session) -> None:
    assert handle_line(session, "   ") is None
    assert session.state.todos == ()


def test_add_command_requires_a_title(session) -> None:
    assert "empty" in (handle_line(session, "/add") or "")
    handle_line(session, "/add Pay rent")
    assert _titles(session) == ["Pay rent"]


def test_toggle_by_number_and_announcement(session) -> None:
    handle_line(session, "one")
    handle_line(session, "two")

    handle_line(session, "/toggle 2")
    assert [t.completed for t in session.state.todos] == [False, True]
    assert session.announcer.message == "Marked as completed"

    handle_line(session, "/done 2")
    assert session.state.todos[1].completed is False
    assert session.announcer.message == "Marked as active"

    assert "No task matches" in (handle_line(session, "/toggle 9") or "")
    assert "Usage" in (handle_line(session, "/toggle") or "")


def test_numbers_follow_the_filtered_view(session) -> None:
    handle_line(session, "a")
    handle_line(session, "b")
    handle_line(session, "c")
    handle_line(session, "/toggle 2")  # b done

    handle_line(session, "/filter active")
    assert session.state.filter is TodoFilter.ACTIVE
    handle_line(session, "/delete 2")  # second *active* item is "a"

    assert _titles(session) == ["c", "b"]
    assert session.announcer.message == "Deleted task: a"


def test_filter_command(session) -> None:
    assert "Filter is all" in (handle_line(session, "/filter") or "")
    assert "Usage" in (handle_line(session, "/filter bogus") or "")
    handle_line(session, "/f Completed")
    assert session.state.filter is TodoFilter.COMPLETED


def test_edit_mode_rename(session) -> None:
    handle_line(session, "Old title")
    prompt = handle_line(session, "/edit 1")
    assert "new title" in (prompt or "")
    assert session.editing_id == session.state.todos[0].id

    handle_line(session, "  New title ")
    assert _titles(session) == ["New title"]
    assert session.editing_id is None
    assert session.announcer.message == "Renamed task to: New title"


def test_edit_with_same_title_announces_nothing_new(session) -> None:
    handle_line(session, "Same")
    session.announcer.cancel()
    handle_line(session, "/edit 1 Same")
    assert _titles(session) == ["Same"]
    assert session.announcer.message == ""


def test_edit_mode_empty_line_deletes(session) -> None:
    handle_line(session, "Doomed")
    handle_line(session, "/edit 1")
    handle_line(session, "")
    assert session.state.todos == ()
    assert session.editing_id is None
    assert session.announcer.message == "Deleted task: Doomed"


def test_edit_inline_and_cancel(session) -> None:
    handle_line(session, "draft")
    handle_line(session, "/e 1 final version")
    assert _titles(session) == ["final version"]

    handle_line(session, "/edit 1")
    handle_line(session, "/cancel")
    assert session.editing_id is None
    assert session.announcer.message == "Edit cancelled"
    assert "Not editing" in (handle_line(session, "/cancel") or "")


def test_clear_and_toggle_all(session) -> None:
    assert "No tasks yet" in (handle_line(session, "/all") or "")
    handle_line(session, "a")
    handle_line(session, "b")

    out = handle_line(session, "/all")
    assert all(t.completed for t in session.state.todos)
    assert "mark all active" in (out or "")

    handle_line(session, "/toggle 1")
    handle_line(session, "/clear")
    assert _titles(session) == ["b"]
    assert session.announcer.message == "Cleared completed tasks"


def test_resolve_ref_by_id_and_prefix(session) -> None:
    handle_line(session, "x")
    handle_line(session, "y")
    target = session.state.todos[1]

    assert resolve_ref(session, target.id) is target
    assert resolve_ref(session, target.id[:12]) is target
    assert resolve_ref(session, "0") is None
    assert resolve_ref(session, "") is None
