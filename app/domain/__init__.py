"""Domain package — all ORM models are imported here so metadata.create_all sees them.

Folder intent:
  owner.py    — Registered owners, deduplicated by (name, surname, patronymic)
  vehicle.py  — Vehicles keyed by registration number, each pointing at one owner
"""

from app.domain.owner import Owner
from app.domain.vehicle import Vehicle

__all__ = [
    "Owner",
    "Vehicle",
]
