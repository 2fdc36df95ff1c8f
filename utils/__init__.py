"""Shared console helpers."""
