"""
Project subsystem.

Components:
- project_models.py: Project, Urgency, ProjectSummary
- project_metrics.py: progress / deadline urgency math and project creation
"""
