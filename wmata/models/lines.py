"""Metrorail line and station codes."""

from __future__ import annotations

import enum


class LineCode(str, enum.Enum):
    """Two-letter Metrorail line code."""

    BLUE = "BL"
    GREEN = "GR"
    ORANGE = "OR"
    RED = "RD"
    SILVER = "SV"
    YELLOW = "YL"

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class StationCode(str, enum.Enum):
    """Metrorail station code as used by the Rail and Prediction APIs."""

    METRO_CENTER = "A01"
    FARRAGUT_NORTH = "A02"
    DUPONT_CIRCLE = "A03"
    WOODLEY_PARK_ZOO_ADAMS_MORGAN = "A04"
    CLEVELAND_PARK = "A05"
    VAN_NESS_UDC = "A06"
    TENLEYTOWN_AU = "A07"
    FRIENDSHIP_HEIGHTS = "A08"
    BETHESDA = "A09"
    MEDICAL_CENTER = "A10"
    GROSVENOR_STRATHMORE = "A11"
    WHITE_FLINT = "A12"
    TWINBROOK = "A13"
    ROCKVILLE = "A14"
    SHADY_GROVE = "A15"
    JUDICIARY_SQUARE = "B02"
    UNION_STATION = "B03"
    RHODE_ISLAND_AVE_BRENTWOOD = "B04"
    BROOKLAND_CUA = "B05"
    TAKOMA = "B07"
    SILVER_SPRING = "B08"
    FOREST_GLEN = "B09"
    WHEATON = "B10"
    GLENMONT = "B11"
    NOMA_GALLAUDET_U = "B35"
    PENTAGON = "C07"
    PENTAGON_CITY = "C08"
    CRYSTAL_CITY = "C09"
    NATIONAL_AIRPORT = "C10"
    BRADDOCK_ROAD = "C12"
    KING_ST_OLD_TOWN = "C13"
    EISENHOWER_AVE = "C14"
    HUNTINGTON = "C15"
    MT_VERNON_SQ = "E01"
    SHAW = "E02"
    U_ST_CARDOZO = "E03"
    COLUMBIA_HEIGHTS = "E04"
    GEORGIA_AVE_PETWORTH = "E05"
    FORT_TOTTEN = "E06"
    WEST_HYATTSVILLE = "E07"
    PRINCE_GEORGES_PLAZA = "E08"
    COLLEGE_PARK_UMD = "E09"
    GREENBELT = "E10"
    GALLERY_PLACE = "F01"
    ARCHIVES = "F02"
    L_ENFANT = "F03"
    WATERFRONT = "F04"
    NAVY_YARD = "F05"
    ANACOSTIA = "F06"
    CONGRESS_HEIGHTS = "F07"
    SOUTHERN_AVE = "F08"
    NAYLOR_ROAD = "F09"
    SUITLAND = "F10"
    BRANCH_AVE = "F11"


_S = StationCode

YELLOW_LINE: tuple[StationCode, ...] = (
    _S.FORT_TOTTEN,
    _S.GEORGIA_AVE_PETWORTH,
    _S.COLUMBIA_HEIGHTS,
    _S.U_ST_CARDOZO,
    _S.SHAW,
    _S.MT_VERNON_SQ,
    _S.GALLERY_PLACE,
    _S.ARCHIVES,
    _S.L_ENFANT,
    _S.PENTAGON,
    _S.PENTAGON_CITY,
    _S.CRYSTAL_CITY,
    _S.NATIONAL_AIRPORT,
    _S.BRADDOCK_ROAD,
    _S.KING_ST_OLD_TOWN,
    _S.EISENHOWER_AVE,
    _S.HUNTINGTON,
)

GREEN_LINE: tuple[StationCode, ...] = (
    _S.GREENBELT,
    _S.COLLEGE_PARK_UMD,
    _S.PRINCE_GEORGES_PLAZA,
    _S.WEST_HYATTSVILLE,
    _S.FORT_TOTTEN,
    _S.GEORGIA_AVE_PETWORTH,
    _S.COLUMBIA_HEIGHTS,
    _S.U_ST_CARDOZO,
    _S.SHAW,
    _S.MT_VERNON_SQ,
    _S.GALLERY_PLACE,
    _S.ARCHIVES,
    _S.L_ENFANT,
    _S.WATERFRONT,
    _S.NAVY_YARD,
    _S.ANACOSTIA,
    _S.CONGRESS_HEIGHTS,
    _S.SOUTHERN_AVE,
    _S.NAYLOR_ROAD,
    _S.SUITLAND,
    _S.BRANCH_AVE,
)

RED_LINE: tuple[StationCode, ...] = (
    _S.SHADY_GROVE,
    _S.ROCKVILLE,
    _S.TWINBROOK,
    _S.WHITE_FLINT,
    _S.GROSVENOR_STRATHMORE,
    _S.MEDICAL_CENTER,
    _S.BETHESDA,
    _S.FRIENDSHIP_HEIGHTS,
    _S.TENLEYTOWN_AU,
    _S.VAN_NESS_UDC,
    _S.CLEVELAND_PARK,
    _S.WOODLEY_PARK_ZOO_ADAMS_MORGAN,
    _S.DUPONT_CIRCLE,
    _S.FARRAGUT_NORTH,
    _S.METRO_CENTER,
    _S.GALLERY_PLACE,
    _S.JUDICIARY_SQUARE,
    _S.UNION_STATION,
    _S.NOMA_GALLAUDET_U,
    _S.RHODE_ISLAND_AVE_BRENTWOOD,
    _S.BROOKLAND_CUA,
    _S.FORT_TOTTEN,
    _S.TAKOMA,
    _S.SILVER_SPRING,
    _S.FOREST_GLEN,
    _S.WHEATON,
    _S.GLENMONT,
)

# Ordered end to end; only lines with a known station sequence are listed.
LINE_STATIONS: dict[LineCode, tuple[StationCode, ...]] = {
    LineCode.YELLOW: YELLOW_LINE,
    LineCode.GREEN: GREEN_LINE,
    LineCode.RED: RED_LINE,
}


def parse_line_code(raw: str | None) -> LineCode | None:
    """Parse a line code or display name.

    Accepts codes ("RD") and display names ("Red") in any case. Empty input
    means "all lines" and returns None.

    Raises:
        ValueError: If the value names no Metrorail line
    """
    if raw is None:
        return None
    key = raw.strip().upper()
    if not key:
        return None

    for line in LineCode:
        if key in (line.value, line.name):
            return line
    raise ValueError(f"Unsupported line code '{raw}'.")


__all__ = [
    "LineCode",
    "StationCode",
    "YELLOW_LINE",
    "GREEN_LINE",
    "RED_LINE",
    "LINE_STATIONS",
    "parse_line_code",
]
