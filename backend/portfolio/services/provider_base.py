"""
Portfolio Backend — Abstract Air Quality Provider
===================================================

What:  Contract for a source of live air-quality station readings.
Why:   The map only needs "stations inside the box" and "one station's
       detail". Keeping that behind an interface lets tests substitute a
       fake and keeps AQICN specifics out of the routes.
Who:   AqicnService implements it; the /api/aqicn routes and the health
       check call it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from portfolio.schemas.station import StationResponse


class AirQualityProvider(ABC):
    """
    Contract:
        - Results use the same StationResponse shape as /api/stations
        - Implementations handle their own retries and circuit breaking
        - Upstream failures surface as UpstreamServiceError or
          CircuitBreakerOpenError; a missing credential as ConfigurationError
    """

    @abstractmethod
    async def fetch_stations(self) -> List[StationResponse]:
        """
        Current readings for every station inside the configured bounds.

        Stations that report no reading are left out.
        """
        ...

    @abstractmethod
    async def fetch_station_detail(self, uid: int) -> Dict[str, Any]:
        """Full upstream record for one station, passed through as-is."""
        ...

    @abstractmethod
    async def health_check(self) -> str:
        """
        What:    Reports readiness without calling the upstream.
        Returns: "configured", "not_configured" or "circuit_open".
        """
        ...
