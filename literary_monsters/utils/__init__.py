"""
Shared utility functions.

This subpackage includes:
- application config loading (config/app.yaml)
- path management
- logging helpers used by the scripts.
"""
