"""Train Positions API.

Unlike the other WMATA APIs the response format is chosen with the
``contentType`` query parameter, not with a path suffix.
"""

from __future__ import annotations

from typing import TypeVar

from wmata.models.base import WMATAResponse
from wmata.models.train_positions import (
    GetLiveTrainPositionsResponse,
    GetStandardRoutesResponse,
    GetTrackCircuitsResponse,
)
from wmata.services.wmata_service import WMATAService

ResponseT = TypeVar("ResponseT", bound=WMATAResponse)


class TrainPositionsService(WMATAService):
    base_path = "/TrainPositions"

    def _get_positions_resource(
        self, path: str, response_model: type[ResponseT]
    ) -> ResponseT:
        url = self.endpoint_url(path, path)
        params = {"contentType": self.response_format.value}
        return self._get(url, params, response_model)

    def get_live_train_positions(self) -> GetLiveTrainPositionsResponse:
        """Position of every train in service, refreshed every few seconds."""
        return self._get_positions_resource(
            "/TrainPositions", GetLiveTrainPositionsResponse
        )

    def get_standard_routes(self) -> GetStandardRoutesResponse:
        """Ordered track circuits making up each line's revenue route."""
        return self._get_positions_resource("/StandardRoutes", GetStandardRoutesResponse)

    def get_track_circuits(self) -> GetTrackCircuitsResponse:
        return self._get_positions_resource("/TrackCircuits", GetTrackCircuitsResponse)


__all__ = ["TrainPositionsService"]
