"""Real-Time Rail Predictions API.

Documentation: https://developer.wmata.com/docs/services/547636a6f9182302184cda78
"""

from __future__ import annotations

from collections.abc import Sequence

from wmata.models.rail_predictions import GetNextTrainResponse
from wmata.services.wmata_service import WMATAService


class RailPredictionsService(WMATAService):
    base_path = "/StationPrediction.svc"

    def get_next_trains(
        self, station_codes: Sequence[str] | None = None
    ) -> GetNextTrainResponse:
        """Next train arrivals for the given stations, or for every station.

        Station codes are sent comma separated in the path; an empty or
        missing sequence requests ``All``.
        """
        codes = ",".join(code for code in station_codes or () if code) or "All"
        url = self.endpoint_url(
            f"/json/GetPrediction/{codes}", f"/GetPrediction/{codes}"
        )
        return self._get(url, None, GetNextTrainResponse, endpoint="GetPrediction")


__all__ = ["RailPredictionsService"]
