"""Core interfaces shared by the CLI and the task store."""
