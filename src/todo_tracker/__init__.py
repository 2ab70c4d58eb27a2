"""todo_tracker: a single-user console task list persisted to a JSON file."""

__version__ = "0.1.0"
