"""Command-line front end: argument parsing, bootstrap and command handlers."""
