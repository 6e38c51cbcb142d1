"""
Report subsystem.

Components:
- report_models.py: Report, ReportStats
- synthesizer.py: deterministic template + simulated async generation backend
"""
