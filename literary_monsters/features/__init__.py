"""
Feature extraction utilities.

This subpackage includes:
- the bag-of-words vocabulary/vectorizer (term counting, trimming,
  index / bag-of-words / dense / count-vector conversion)
- helpers to fit, persist, reload and batch-apply the vectorizer.
"""
