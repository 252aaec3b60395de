from .controller import TaskLifecycleController
from .ids import new_task_id, is_valid_task_id
from .messages import build_run_task, build_finish_task

__all__ = [
    "TaskLifecycleController",
    "build_finish_task",
    "build_run_task",
    "is_valid_task_id",
    "new_task_id",
]
