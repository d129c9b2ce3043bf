"""Pydantic schemas package.

Folder intent:
  common.py  — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  beer.py    — Beer create / update / patch request bodies and the BeerOut record
"""
