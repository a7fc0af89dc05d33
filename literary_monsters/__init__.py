"""
Top-level package for the literary monsters text-feature project.

This package contains modules for:
- loading book corpora and splitting them into paragraph documents
- the bag-of-words vocabulary/vectorizer used for feature extraction
- persisting and reloading fitted vectorizers
- running the pre-trained monster-type classifier over new text
- shared configuration and logging helpers
"""
