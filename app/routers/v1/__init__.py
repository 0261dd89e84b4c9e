"""v1 router package — all /api/v1/* endpoints live here.

Files:
  vehicles.py  — Vehicle catalog: list/filter, bulk add, partial update, delete

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to app/services/.
"""
