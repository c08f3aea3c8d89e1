# src/task_dashboard/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .task_models import Task, TaskUpdate

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task store.

    - Insertion order is preserved; lookups are linear scans by id.
    - Task ids are unique within a store: a duplicate add is rejected.
    - Misses (update/delete of an unknown id) are logged, never raised.

    Thread-safety:
    - none; the store is owned by a single driver
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = []
        for task in tasks or ():
            self.add_task(task)
        logger.debug("TaskStore ready total=%s", len(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return -1

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx != -1 else None

    def add_task(self, task: Task) -> bool:
        if self._index_of(task.id) != -1:
            logger.error("Task id=%s already exists; add ignored", task.id)
            return False

        self._tasks.append(task)
        logger.debug("Task added id=%s completed=%s", task.id, task.completed)
        return True

    def list_tasks(self) -> list[Task]:
        """Ordered snapshot of current tasks (empty list means no tasks)."""
        return list(self._tasks)

    def update_task(self, task_id: int, update: TaskUpdate) -> Task | None:
        """
        Apply the present fields of `update` to the first task with `task_id`.

        Returns the updated record, or None if the id is unknown (no upsert).
        """
        task = self.get_task(task_id)
        if task is None:
            logger.warning("update_task: task id=%s not found", task_id)
            return None

        update.apply_to(task)
        logger.debug("Task updated id=%s task=%r completed=%s", task.id, task.task, task.completed)
        return task

    def delete_task(self, task_id: int) -> bool:
        idx = self._index_of(task_id)
        if idx == -1:
            logger.warning("delete_task: task id=%s not found", task_id)
            return False

        del self._tasks[idx]
        logger.debug("Task deleted id=%s remaining=%s", task_id, len(self._tasks))
        return True
