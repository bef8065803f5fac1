"""Logging, seeding and configuration helpers."""
