"""Services package — all business logic lives here, never in routers.

Files:
  beer.py     — BeerService: create / get / list / update / patch / delete
  filters.py  — BeerFilter: list predicate composition and inventory redaction

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
