"""taskdeck: single-user, in-memory task list engine with a console front end."""

__version__ = "0.1.0"
