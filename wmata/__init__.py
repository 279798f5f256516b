"""Typed synchronous client for the WMATA transit REST API."""

from wmata.core.constants import ResponseFormat
from wmata.models.lines import LineCode, StationCode, parse_line_code
from wmata.services.bus_info import BusInfoService
from wmata.services.bus_predictions import BusPredictionsService
from wmata.services.incidents import IncidentsService
from wmata.services.rail_info import RailStationInfoService
from wmata.services.rail_predictions import RailPredictionsService
from wmata.services.train_positions import TrainPositionsService
from wmata.services.wmata_client import WMATAClient
from wmata.services.wmata_errors import (
    APIKeyValidationError,
    DecodeError,
    MissingParameterError,
    WMATAError,
)

__version__ = "0.1.0"

__all__ = [
    "APIKeyValidationError",
    "BusInfoService",
    "BusPredictionsService",
    "DecodeError",
    "IncidentsService",
    "LineCode",
    "MissingParameterError",
    "RailPredictionsService",
    "RailStationInfoService",
    "ResponseFormat",
    "StationCode",
    "TrainPositionsService",
    "WMATAClient",
    "WMATAError",
    "parse_line_code",
]
