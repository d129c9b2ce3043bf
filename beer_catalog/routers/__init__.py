"""Routers package — HTTP endpoint definitions.

Files:
  v1/  — Versioned API routes (mounted under settings.api_prefix)
"""
