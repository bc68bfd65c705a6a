# ABOUTME: Scraper for the six-day surf forecast page of a single beach
# ABOUTME: Extracts per-period wave/wind cells plus star rating and water temperature

import json
import logging
import math
import re
from typing import Optional

import requests
from bs4 import BeautifulSoup, Tag

from surf_alert.debug import debug_log
from surf_alert.forecast.compass import CompassDirection
from surf_alert.forecast.models import GRID_SIZE, RawCell, RawForecast, SwellComponent

log = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"(\d+(?:\.\d+)?)")
# Page encoding is sometimes mangled, so tolerate a stray "Â" before the degree sign
TEMPERATURE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*Â?°\s*C")


class FetchError(Exception):
    """The forecast page could not be retrieved"""


class CellParseError(Exception):
    """A single forecast cell could not be decoded"""


class ForecastScraper:
    """
    Client for surf-forecast.com style six-day forecast pages.

    One fetch() makes exactly one HTTP request. Everything after that is
    best-effort parsing: a broken cell is logged and skipped, and missing
    scalar fields fall back to neutral defaults.
    """

    PATH_TEMPLATE = "{base_url}/breaks/{beach_id}/forecasts/latest/six_day"

    HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
        )
    }

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session
        self.timeout = timeout

    def forecast_url(self, beach_id: str) -> str:
        return self.PATH_TEMPLATE.format(base_url=self.base_url, beach_id=beach_id)

    def fetch(self, beach_id: str) -> RawForecast:
        """
        Fetch and parse the forecast page for a beach.

        Args:
            beach_id: Beach slug, e.g. "Pipeline"

        Returns:
            RawForecast with the cells that decoded plus rating/temperature

        Raises:
            FetchError: If the request fails or returns a non-2xx status
        """
        url = self.forecast_url(beach_id)
        debug_log(f"Fetching {url}", "SCRAPER")

        getter = self.session.get if self.session is not None else requests.get
        try:
            response = getter(url, headers=self.HEADERS, timeout=self.timeout)
        except requests.RequestException as e:
            log.error(f"Forecast request failed for {beach_id}: {e}")
            raise FetchError(f"Request for {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            log.error(f"Forecast HTTP error for {beach_id}: {response.status_code}")
            raise FetchError(f"Request for {url} returned HTTP {response.status_code}")

        return self.parse(response.text)

    def parse(self, html: str) -> RawForecast:
        """Parse forecast page markup. Never raises on malformed content."""
        soup = BeautifulSoup(html, "html.parser")

        periods = self._parse_periods(soup)
        cells = []
        wave_cells = soup.select(".forecast-table-wave-height__cell")
        debug_log(f"Found {len(wave_cells)} wave cells, {len(periods)} periods", "SCRAPER")

        for index, cell in enumerate(wave_cells[:GRID_SIZE]):
            period = periods[index] if index < len(periods) else 0.0
            try:
                cells.append(self._parse_cell(index, cell, period))
            except CellParseError as e:
                log.warning(f"Skipping forecast cell {index}: {e}")

        if len(wave_cells) > GRID_SIZE:
            debug_log(f"Ignoring {len(wave_cells) - GRID_SIZE} cells past day 7", "SCRAPER")

        return RawForecast(
            cells=cells,
            rating=self._parse_rating(soup),
            temperature=self._parse_temperature(soup),
        )

    def _parse_periods(self, soup: BeautifulSoup) -> list[float]:
        """Wave periods (s) from the periods row, 0 where a cell is unreadable"""
        row = soup.select_one('.forecast-table__row[data-row-name="periods"]')
        if row is None:
            log.warning("Periods row not found in forecast table")
            return []

        periods = []
        for cell in row.select(".forecast-table__cell"):
            strong = cell.find("strong")
            text = strong.get_text(strip=True) if strong else ""
            periods.append(_first_number(text) or 0.0)
        return periods

    def _parse_cell(self, index: int, cell: Tag, period: float) -> RawCell:
        value = cell.select_one(".swell-icon__val")
        if value is None:
            raise CellParseError("missing wave height element")
        height = _first_number(value.get_text(strip=True))
        if height is None:
            raise CellParseError(f"unreadable wave height {value.get_text(strip=True)!r}")

        wind_speed, wind_direction = self._parse_wind(cell.get("data-wind"))

        return RawCell(
            index=index,
            wave_height=height,
            wave_period=period,
            wave_direction=self._parse_wave_direction(cell),
            wind_speed=wind_speed,
            wind_direction=wind_direction,
            swells=self._parse_swells(index, cell.get("data-swell-state")),
        )

    def _parse_wave_direction(self, cell: Tag) -> CompassDirection:
        letters = cell.select_one(".swell-icon__letters")
        direction = CompassDirection.parse(letters.get_text(strip=True) if letters else None)
        if direction.is_known:
            return direction

        titled = cell.select_one("[title]")
        if titled is not None:
            return CompassDirection.parse(titled.get("title"))
        return CompassDirection.UNKNOWN

    def _parse_wind(self, payload: Optional[str]) -> tuple[float, CompassDirection]:
        """Decode the data-wind JSON attribute into (speed km/h, direction)"""
        if not payload:
            raise CellParseError("missing data-wind payload")
        try:
            wind = json.loads(payload)
        except (json.JSONDecodeError, RecursionError) as e:
            raise CellParseError(f"malformed data-wind payload: {e}") from e
        if not isinstance(wind, dict):
            raise CellParseError(f"unexpected data-wind payload: {payload!r}")

        speed = _non_negative(wind.get("speed") or 0, "wind speed")

        direction = wind.get("direction")
        letters = direction.get("letters") if isinstance(direction, dict) else direction
        return speed, CompassDirection.parse(letters)

    def _parse_swells(self, index: int, payload: Optional[str]) -> list[SwellComponent]:
        """
        Decode the optional data-swell-state attribute into swell trains.

        The payload is a JSON list with null gaps, each entry like
        {"height": 1.2, "period": 14, "letters": "SW"}. It only enriches
        the cell, so a bad payload just yields no swells.
        """
        if not payload:
            return []
        try:
            state = json.loads(payload)
            swells = [
                SwellComponent(
                    height=_non_negative(swell.get("height", 0), "swell height"),
                    period=_non_negative(swell.get("period", 0), "swell period"),
                    direction=CompassDirection.parse(swell.get("letters")),
                )
                for swell in state
                if swell
            ]
        except (ValueError, RecursionError, TypeError, AttributeError, CellParseError) as e:
            debug_log(f"Ignoring swell state for cell {index}: {e}", "SCRAPER")
            return []
        return sorted(swells, key=lambda swell: swell.height, reverse=True)

    def _parse_rating(self, soup: BeautifulSoup) -> str:
        cell = soup.select_one(".forecast-table tbody tr:first-child td:nth-child(2)")
        if cell is None:
            return "N/A"
        stars = len(cell.find_all("img"))
        return f"{stars} stars" if stars > 0 else "N/A"

    def _parse_temperature(self, soup: BeautifulSoup) -> float:
        for element in soup.find_all(string=re.compile("sea temperature is", re.I)):
            container = element.find_parent("div") or element.parent
            text = container.get_text(" ", strip=True) if container else str(element)
            match = TEMPERATURE_PATTERN.search(text)
            if match:
                return float(match.group(1))
        return 0.0


def _first_number(text: str) -> Optional[float]:
    match = NUMBER_PATTERN.search(text or "")
    return float(match.group(1)) if match else None


def _non_negative(value, label: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise CellParseError(f"unreadable {label} {value!r}") from e
    if not math.isfinite(number) or number < 0:
        raise CellParseError(f"invalid {label} {value!r}")
    return number
