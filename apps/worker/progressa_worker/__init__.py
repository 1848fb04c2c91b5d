"""Progressa Temporal worker."""
