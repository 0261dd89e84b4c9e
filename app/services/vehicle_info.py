"""Client for the external vehicle-info service.

Given a registration number, the service answers with the full vehicle
description (mark, model, year and owner) used to enrich bulk ingestion.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.core.config import Settings
from app.core.exceptions import VehicleInfoError

logger = logging.getLogger(__name__)


class VehicleInfoClient:
    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    @classmethod
    def from_settings(cls, settings: Settings) -> "VehicleInfoClient":
        return cls(
            httpx.AsyncClient(
                base_url=settings.vehicle_info_url,
                timeout=settings.vehicle_info_timeout,
            )
        )

    async def fetch(self, reg_num: str) -> dict[str, Any]:
        """Return the raw vehicle payload for ``reg_num``.

        Raises :class:`VehicleInfoError` carrying 400/404 when the upstream
        rejects or does not know the number, 502 for anything else.
        """
        try:
            response = await self._http.get("/info", params={"regNum": reg_num})
        except httpx.HTTPError as exc:
            logger.error("vehicle info request for %s failed: %s", reg_num, exc)
            raise VehicleInfoError(f"Vehicle info service unavailable for car: {reg_num}") from exc

        if response.status_code == 400:
            raise VehicleInfoError(f"Incorrect data for car: {reg_num}", status_code=400)
        if response.status_code == 404:
            raise VehicleInfoError(f"Can not find car: {reg_num}", status_code=404)
        if response.status_code >= 400:
            logger.error(
                "vehicle info service answered %s for %s", response.status_code, reg_num
            )
            raise VehicleInfoError(f"Vehicle info service error for car: {reg_num}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise VehicleInfoError(f"Malformed vehicle info for car: {reg_num}") from exc
        if not isinstance(payload, dict):
            raise VehicleInfoError(f"Malformed vehicle info for car: {reg_num}")

        logger.debug("vehicle info for %s: %s", reg_num, payload)
        return payload

    async def aclose(self) -> None:
        await self._http.aclose()
