"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskCounts)
- task_board.py: kanban status machine (drag/drop, transition, create, columns)
"""
