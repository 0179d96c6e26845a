"""Shared integrations."""
