"""Cluster Review Tagging - tag the reviewable subset of near-duplicate clusters."""

__version__ = "1.0.0"
