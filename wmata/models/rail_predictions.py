"""Records for the Real-Time Rail Predictions API (StationPrediction.svc)."""

from __future__ import annotations

from pydantic import Field

from wmata.models.base import WMATAModel, WMATAResponse


class Train(WMATAModel):
    car: str | None = Field(None, alias="Car")
    destination: str | None = Field(None, alias="Destination")
    destination_code: str | None = Field(None, alias="DestinationCode")
    destination_name: str | None = Field(None, alias="DestinationName")
    group: str | None = Field(None, alias="Group")
    line: str | None = Field(None, alias="Line")
    location_code: str | None = Field(None, alias="LocationCode")
    location_name: str | None = Field(None, alias="LocationName")
    # Minutes until arrival, or "ARR" / "BRD" / "---".
    minutes: str | None = Field(None, alias="Min")


class GetNextTrainResponse(WMATAResponse):
    xml_root = "AIMPredictionResp"

    trains: list[Train] = Field(default_factory=list, alias="Trains")


__all__ = ["Train", "GetNextTrainResponse"]
