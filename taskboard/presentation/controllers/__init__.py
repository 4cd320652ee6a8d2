from taskboard.presentation.controllers.task_controller import TaskController

__all__ = ["TaskController"]
