"""
Data loading utilities.

This subpackage provides:
- the data configuration loader (config/data.yaml)
- paragraph splitting for raw book text
- a corpus loader returning one labeled document per paragraph.
"""
