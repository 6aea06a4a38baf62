"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskEvent, RunResult) and errors
- task_api.py: small high-level helpers used by the CLI and by callers
"""
