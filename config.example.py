# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)
"""

ENV_VARS = {
    # App / logging
    "TASKDECK_APP_NAME": "App display name (default: taskdeck).",
    "TASKDECK_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKDECK_DATA_DIR": "Local directory for taskdeck.log (default: .local/taskdeck).",
    "TASKDECK_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/taskdeck.log (true/false, default: true).",
    # Tasks / rendering
    "TASKDECK_DEFAULT_PRIORITY": "Priority for /add without !priority: low, medium, high (default: medium).",
    "TASKDECK_COMPACT": "Short stats line, e.g. T:3 A:2 C:1 (true/false, default: false).",
}
