# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKMATE_APP_NAME": "Name used in the greeting (default: Taskmate).",
    "TASKMATE_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TASKMATE_DATA_DIR": "Local data directory (default: .local/taskmate).",
    "TASKMATE_TASKS_PATH": "Task file path (default: <data_dir>/tasks.txt).",
    "TASKMATE_LOG_DIR": "Directory for taskmate.log (default: <data_dir>).",
    # Loading
    "TASKMATE_SKIP_CORRUPT": "Skip unreadable lines in the task file instead of failing (default: true).",
}
