"""
Task subsystem.

Components:
- task_models.py: data structures (Task, outcomes, summary) + renderings
- task_store.py: JSON-file storage with the read-modify-write operations
"""
