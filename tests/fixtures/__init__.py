"""Shared pytest plugins and helpers."""
