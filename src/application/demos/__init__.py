"""Runnable demonstrations of each pattern example."""
