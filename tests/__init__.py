"""LabelSense test suite."""
