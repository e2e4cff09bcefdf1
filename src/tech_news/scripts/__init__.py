"""Operational scripts for the Tech News service."""
