"""
pm_dashboard: in-memory project/task state engine with a console front-end.

Subpackages:
- tasks/: Task, TaskStatus, the kanban status machine
- projects/: Project and derived progress / urgency metrics
- budget/: budget ledger (line items + totals)
- reports/: templated report synthesis (simulated async backend)
- core/: errors, ids, ports, collection controllers, AppState
- cli/, connectors/: console REPL and slash commands
"""

__version__ = "0.1.0"
