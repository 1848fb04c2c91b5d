"""Progressa HTTP API."""
