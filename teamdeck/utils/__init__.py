"""Utility modules for teamdeck.

- logging: logger configuration for the CLI (stderr) and the TUI (log file)
- output: shared Rich console and JSON printing
"""
