"""v1 router package — all beer endpoints live here.

Files:
  beers.py  — Beer CRUD + filtered list

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to beer_catalog/services/.
"""
