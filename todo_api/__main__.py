"""Allow `python -m todo_api`."""

from todo_api.main import run

run()
