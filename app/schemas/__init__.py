"""Pydantic schemas package.

Folder intent:
  common.py   — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  vehicle.py  — Vehicle/owner DTOs, partial-update and search filter schemas
"""
