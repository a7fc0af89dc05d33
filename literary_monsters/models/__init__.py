"""
Model wrappers.

This subpackage contains the inference helper for the pre-trained
monster-type classifier (vampire vs. Frankenstein's creature).
"""
