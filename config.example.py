# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKRUN_APP_NAME": "App display name used in messages (default: taskrun).",
    "TASKRUN_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKRUN_LOG_TO_FILE": "Also write a DEBUG log to <data_dir>/taskrun.log (true/false).",
    "TASKRUN_DATA_DIR": "Local data directory (default: .local/taskrun).",
    # Runner
    "TASKRUN_STRATEGY": "threads | cooperative | asyncio | sequential (default: threads).",
    "TASKRUN_TIME_UNIT": "Seconds per delay unit (default: 1.0).",
    "TASKRUN_SHOW_TIMES": "Prefix each event line with seconds since the run began (true/false).",
}
