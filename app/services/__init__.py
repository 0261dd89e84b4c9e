"""Services package — all business logic lives here, never in routers.

Files:
  vehicle.py       — Vehicle ingestion, update, deletion and listing rules
  vehicle_info.py  — httpx client for the external vehicle-info lookup

Rule: routers call services, services call the store, the store calls repositories.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
