"""Temporal activities for Progressa workflows."""

from .certificate_activities import make_certificate_activities

__all__ = ["make_certificate_activities"]
