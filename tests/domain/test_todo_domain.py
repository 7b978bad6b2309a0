"""Tests for the todo aggregate: colours, items and their events."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from exemplum.domain.todo import (
    PALETTE,
    Colour,
    PriorityLevel,
    TodoItem,
    TodoItemCompletedEvent,
    TodoList,
)
from exemplum.primitives.exceptions import (
    InvariantViolationError,
    UnsupportedColourError,
)


class TestColour:
    def test_from_code_normalises_case_and_whitespace(self) -> None:
        colour = Colour.from_code(" #ff5733 ")
        assert colour.code == "#FF5733"
        assert colour.name == "Red"

    def test_unsupported_code_raises(self) -> None:
        with pytest.raises(UnsupportedColourError) as exc_info:
            Colour.from_code("#123456")
        assert exc_info.value.code == "#123456"
        assert "#123456" in str(exc_info.value)

    def test_white_is_default_for_new_lists(self) -> None:
        assert TodoList(title="Groceries").colour == Colour.white()
        assert Colour.white().code == PALETTE["White"]

    def test_supported_colours_cover_palette(self) -> None:
        codes = [c.code for c in Colour.supported_colours()]
        assert codes == list(PALETTE.values())
        assert all(Colour.is_supported(code) for code in codes)
        assert not Colour.is_supported("#000000")

    def test_value_equality_and_hash(self) -> None:
        assert Colour.from_code("#6666ff") == Colour.from_code("#6666FF")
        assert len({Colour.from_code("#6666ff"), Colour.from_code("#6666FF")}) == 1
        assert str(Colour.white()) == "#FFFFFF"
        assert Colour.white() != "#FFFFFF"


class TestTodoList:
    def test_rename_rejects_blank_title(self) -> None:
        todo_list = TodoList(title="Work")
        with pytest.raises(InvariantViolationError):
            todo_list.rename("   ")
        todo_list.rename("Home")
        assert todo_list.title == "Home"

    def test_change_colour(self) -> None:
        todo_list = TodoList(title="Work")
        todo_list.change_colour(Colour.from_code("#9966cc"))
        assert todo_list.colour.name == "Purple"
        assert todo_list.domain_events == ()

    def test_new_list_is_transient(self) -> None:
        todo_list = TodoList(title="Work")
        assert todo_list.is_transient
        assert todo_list.domain_events == ()


class TestTodoItem:
    def test_mark_as_done_queues_completed_event(self) -> None:
        item = TodoItem(list_id=1, title="Write tests")

        item.mark_as_done()

        assert item.done
        assert len(item.domain_events) == 1
        event = item.domain_events[0]
        assert isinstance(event, TodoItemCompletedEvent)
        assert event.item is item

    def test_completing_done_item_queues_nothing(self) -> None:
        item = TodoItem(list_id=1, title="Write tests")
        item.mark_as_done()
        item.mark_as_done()
        assert len(item.domain_events) == 1

    def test_item_created_done_has_no_events(self) -> None:
        item = TodoItem(list_id=1, title="Already done", done=True)
        assert item.domain_events == ()

    def test_clear_domain_events(self) -> None:
        item = TodoItem(list_id=1, title="Write tests")
        item.mark_as_done()
        item.clear_domain_events()
        assert item.domain_events == ()

    def test_domain_events_view_is_read_only(self) -> None:
        item = TodoItem(list_id=1, title="Write tests")
        item.mark_as_done()
        events = item.domain_events
        assert isinstance(events, tuple)

    def test_set_priority_reminder_and_note(self) -> None:
        item = TodoItem(list_id=1, title="Dentist")
        reminder = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)

        item.set_priority(PriorityLevel.MEDIUM)
        item.set_reminder(reminder)
        item.update_note("Bring the insurance card")

        assert item.priority is PriorityLevel.MEDIUM
        assert item.reminder == reminder
        assert item.note == "Bring the insurance card"
        assert item.domain_events == ()

    def test_clearing_reminder(self) -> None:
        item = TodoItem(
            list_id=1,
            title="Dentist",
            reminder=datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc),
        )
        item.set_reminder(None)
        assert item.reminder is None

    def test_defaults(self) -> None:
        item = TodoItem(list_id=3, title="Defaults")
        assert item.priority is PriorityLevel.NONE
        assert item.note == ""
        assert item.reminder is None
        assert not item.done

    def test_event_id_and_timestamp_are_set(self) -> None:
        item = TodoItem(list_id=1, title="Write tests")
        item.mark_as_done()
        event = item.domain_events[0]
        assert event.event_id
        assert event.occurred_at.tzinfo is not None
