"""Real-Time Bus Predictions API.

Documentation: https://developer.wmata.com/docs/services/5476365e031f590f38092508
"""

from __future__ import annotations

from wmata.models.bus_predictions import GetNextBusResponse
from wmata.services.wmata_service import WMATAService, require


class BusPredictionsService(WMATAService):
    base_path = "/NextBusService.svc"

    def get_next_buses(self, stop_id: str) -> GetNextBusResponse:
        """Next bus arrival times at a stop."""
        params = {"StopID": require("stop_id", stop_id)}
        url = self.endpoint_url("/json/jPredictions", "/Predictions")
        return self._get(url, params, GetNextBusResponse)


__all__ = ["BusPredictionsService"]
