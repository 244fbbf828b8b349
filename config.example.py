# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPAL_APP_NAME": "App display name (default: taskpal).",
    "TASKPAL_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths
    "TASKPAL_DATA_DIR": "Local data directory (default: data).",
    "TASKPAL_TASKS_PATH": "Task file (default: <data_dir>/duke.txt).",
    "TASKPAL_LOG_DIR": "Directory for taskpal.log (default: <data_dir>).",
    # Load policy
    "TASKPAL_STRICT_LOAD": (
        "true (default): a corrupt task file stops startup with an error. "
        "false: log the error and start with an empty list."
    ),
}
