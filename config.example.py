# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Nothing here is persisted: all projects/tasks/budget/report data lives in memory
and is reset on restart. PMD_DATA_DIR only receives log files.
"""

ENV_VARS = {
    # App / logging
    "PMD_APP_NAME": "App display name (default: pm-dashboard).",
    "PMD_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    "PMD_DATA_DIR": "Directory for log files (default: .local/pm_dashboard).",
    # Reports
    "PMD_REPORT_LATENCY_MS": "Simulated report generation latency in ms (default: 2000).",
    "PMD_REPORT_SUPERSEDE": "A new /report cancels the pending one (true/false, default: true).",
    "PMD_DEFAULT_PROJECT_NAME": "Project name used by /report without arguments (default: New Project).",
    # Startup
    "PMD_SEED_DEMO_DATA": "Load demo projects/tasks/budget/reports at startup (true/false, default: true).",
}
