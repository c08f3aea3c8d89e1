# src/task_dashboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    """
    A single to-do record.

    `id` is assigned by the caller, never generated by the store.
    Records are mutable: updates are applied in place.
    """

    id: int
    task: str
    completed: bool = False


@dataclass(frozen=True, slots=True)
class TaskUpdate:
    """
    Partial update for a Task.

    Each field is independently present or absent:
    - None   -> leave the field unchanged
    - value  -> overwrite (including falsy values like "" or False)
    """

    task: str | None = None
    completed: bool | None = None

    def is_empty(self) -> bool:
        return self.task is None and self.completed is None

    def apply_to(self, target: Task) -> Task:
        if self.task is not None:
            target.task = self.task
        if self.completed is not None:
            target.completed = self.completed
        return target


def format_task(task: Task) -> str:
    """Human-readable one-liner used by the console dashboard."""
    completed = "true" if task.completed else "false"
    return f"ID: {task.id}, Task: {task.task}, Completed: {completed}"
