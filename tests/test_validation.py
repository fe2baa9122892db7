"""
Tests for the create-time Validation Filter
============================================
"""
import unittest
from datetime import datetime, timedelta, timezone

from todo_api.api.validation import validate_new_todo, validated_todo
from todo_api.errors import TodoValidationError
from todo_api.models.todos import Todo

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_todo(due_date, is_completed=False):
    return Todo(id=1, name="task", due_date=due_date, is_completed=is_completed)


class TestValidateNewTodo(unittest.TestCase):

    def test_valid_todo_has_no_errors(self):
        todo = make_todo(NOW + timedelta(days=1))
        self.assertEqual(validate_new_todo(todo, now=NOW), {})

    def test_due_date_equal_to_now_is_valid(self):
        self.assertEqual(validate_new_todo(make_todo(NOW), now=NOW), {})

    def test_past_due_date(self):
        errors = validate_new_todo(make_todo(NOW - timedelta(seconds=1)), now=NOW)
        self.assertEqual(errors, {"DueDate": ["Cannot have due date in the past."]})

    def test_completed_todo(self):
        errors = validate_new_todo(make_todo(NOW + timedelta(days=1), True), now=NOW)
        self.assertEqual(errors, {"IsCompleted": ["Cannot add completed todo."]})

    def test_all_violations_reported_together(self):
        errors = validate_new_todo(make_todo(NOW - timedelta(days=1), True), now=NOW)
        self.assertEqual(set(errors), {"DueDate", "IsCompleted"})

    def test_naive_due_date_treated_as_utc(self):
        naive = datetime(2026, 6, 1, 11, 0)
        self.assertIn("DueDate", validate_new_todo(make_todo(naive), now=NOW))

    def test_offset_due_date_compared_in_utc(self):
        # 13:30 at +02:00 is 11:30 UTC, before NOW
        due = datetime(2026, 6, 1, 13, 30, tzinfo=timezone(timedelta(hours=2)))
        self.assertIn("DueDate", validate_new_todo(make_todo(due), now=NOW))


class TestTodoDueDate(unittest.TestCase):

    def test_naive_due_date_gets_utc(self):
        todo = make_todo(datetime(2999, 1, 1, 0, 0))
        self.assertEqual(todo.due_date.tzinfo, timezone.utc)

    def test_offset_due_date_converted_to_utc(self):
        todo = make_todo(datetime(2999, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2))))
        self.assertEqual(todo.due_date, datetime(2999, 1, 1, tzinfo=timezone.utc))
        self.assertEqual(todo.due_date.tzinfo, timezone.utc)

    def test_parsed_from_json_alias(self):
        todo = Todo.model_validate(
            {"id": 1, "name": "x", "dueDate": "2999-01-01T02:00:00+02:00", "isCompleted": False}
        )
        self.assertEqual(todo.model_dump(by_alias=True, mode="json")["dueDate"], "2999-01-01T00:00:00Z")


class TestValidatedTodoDependency(unittest.TestCase):

    def test_passes_valid_todo_through(self):
        todo = make_todo(datetime(2999, 1, 1, tzinfo=timezone.utc))
        self.assertIs(validated_todo(todo), todo)

    def test_raises_with_errors(self):
        todo = make_todo(datetime(2000, 1, 1, tzinfo=timezone.utc), True)
        with self.assertRaises(TodoValidationError) as ctx:
            validated_todo(todo)
        self.assertEqual(set(ctx.exception.errors), {"DueDate", "IsCompleted"})


if __name__ == "__main__":
    unittest.main()
