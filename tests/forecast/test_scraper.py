# ABOUTME: Tests for the six-day forecast page scraper
# ABOUTME: Uses canned markup and mocked requests to avoid real network calls

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from surf_alert.forecast.compass import CompassDirection
from surf_alert.forecast.models import RawForecast
from surf_alert.forecast.scraper import FetchError, ForecastScraper


def mock_response(status_code=200, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


class TestFetch:
    """Tests for the network side of ForecastScraper"""

    def test_fetch_requests_six_day_forecast_url(self, full_page):
        with patch('surf_alert.forecast.scraper.requests.get') as mock_get:
            mock_get.return_value = mock_response(text=full_page)

            scraper = ForecastScraper("https://forecast.example/", timeout=5)
            result = scraper.fetch("Pipeline")

            assert isinstance(result, RawForecast)
            mock_get.assert_called_once()
            call_args = mock_get.call_args
            assert call_args[0][0] == "https://forecast.example/breaks/Pipeline/forecasts/latest/six_day"
            assert "Mozilla" in call_args[1]["headers"]["User-Agent"]
            assert call_args[1]["timeout"] == 5

    def test_fetch_uses_session_when_given(self, full_page):
        session = MagicMock()
        session.get.return_value = mock_response(text=full_page)

        scraper = ForecastScraper("https://forecast.example", session=session)
        scraper.fetch("Pipeline")

        session.get.assert_called_once()

    def test_fetch_raises_on_http_error(self):
        with patch('surf_alert.forecast.scraper.requests.get') as mock_get:
            mock_get.return_value = mock_response(status_code=503, text="Unavailable")

            scraper = ForecastScraper("https://forecast.example")
            with pytest.raises(FetchError, match="503"):
                scraper.fetch("Pipeline")

    def test_fetch_raises_on_network_error(self):
        with patch('surf_alert.forecast.scraper.requests.get') as mock_get:
            mock_get.side_effect = requests.ConnectionError("Connection refused")

            scraper = ForecastScraper("https://forecast.example")
            with pytest.raises(FetchError) as excinfo:
                scraper.fetch("Pipeline")

            assert isinstance(excinfo.value.__cause__, requests.ConnectionError)

    def test_fetch_tolerates_garbage_page(self):
        with patch('surf_alert.forecast.scraper.requests.get') as mock_get:
            mock_get.return_value = mock_response(text="<html><p>maintenance</p></html>")

            result = ForecastScraper("https://forecast.example").fetch("Pipeline")

            assert result.cells == []
            assert result.rating == "N/A"
            assert result.temperature == 0.0


class TestParse:
    """Tests for markup parsing"""

    def setup_method(self):
        self.scraper = ForecastScraper("https://forecast.example")

    def test_parses_all_cells(self, full_page):
        result = self.scraper.parse(full_page)

        assert len(result.cells) == 21
        assert [cell.index for cell in result.cells] == list(range(21))

    def test_parses_cell_values(self, make_cell, make_page):
        page = make_page(
            [make_cell(height="1.8", letters="WSW", wind={"speed": 12, "direction": {"letters": "ENE"}})],
            periods=[16],
        )

        cell = self.scraper.parse(page).cells[0]

        assert cell.wave_height == 1.8
        assert cell.wave_period == 16.0
        assert cell.wave_direction == CompassDirection.WSW
        assert cell.wind_speed == 12.0
        assert cell.wind_direction == CompassDirection.ENE

    def test_parses_rating_and_temperature(self, full_page):
        result = self.scraper.parse(full_page)

        assert result.rating == "3 stars"
        assert result.temperature == 17.5

    def test_tolerates_mangled_degree_sign(self, make_cell, make_page):
        page = make_page([make_cell()], temperature="19Â°C")
        assert self.scraper.parse(page).temperature == 19.0

    def test_missing_scalars_default(self, make_cell, make_page):
        result = self.scraper.parse(make_page([make_cell()], stars=0, temperature=None))

        assert result.rating == "N/A"
        assert result.temperature == 0.0

    def test_malformed_wind_payload_skips_only_that_cell(self, make_cell, make_page):
        cells = [make_cell(), make_cell(raw_wind="{not json"), make_cell()]

        result = self.scraper.parse(make_page(cells))

        assert [cell.index for cell in result.cells] == [0, 2]

    def test_missing_wind_payload_skips_cell(self, make_cell, make_page):
        result = self.scraper.parse(make_page([make_cell(wind=False), make_cell()]))
        assert [cell.index for cell in result.cells] == [1]

    def test_missing_height_skips_cell(self, make_cell, make_page):
        result = self.scraper.parse(make_page([make_cell(height=None), make_cell(height="flat")]))
        assert result.cells == []

    def test_negative_wind_speed_skips_cell(self, make_cell, make_page):
        result = self.scraper.parse(make_page([make_cell(wind={"speed": -4, "direction": {"letters": "N"}})]))
        assert result.cells == []

    def test_unknown_direction_letters(self, make_cell, make_page):
        page = make_page([make_cell(letters="", wind={"speed": 5, "direction": {}})])

        cell = self.scraper.parse(page).cells[0]

        assert cell.wave_direction == CompassDirection.UNKNOWN
        assert cell.wind_direction == CompassDirection.UNKNOWN

    def test_wave_direction_falls_back_to_title(self, make_page):
        wind = json.dumps({"speed": 5, "direction": {"letters": "N"}})
        cell = (
            f"<td class=\"forecast-table-wave-height__cell\" data-wind='{wind}'>"
            '<div class="swell-icon__val">1.2</div>'
            '<span title="SSW (202°)">arrow</span></td>'
        )

        result = self.scraper.parse(make_page([cell]))

        assert result.cells[0].wave_direction == CompassDirection.SSW

    def test_missing_period_defaults_to_zero(self, make_cell, make_page):
        page = make_page([make_cell(), make_cell()], periods=[15, "--"])

        result = self.scraper.parse(page)

        assert result.cells[0].wave_period == 15.0
        assert result.cells[1].wave_period == 0.0

    def test_ignores_cells_past_seven_days(self, make_cell, make_page):
        result = self.scraper.parse(make_page([make_cell() for _ in range(24)]))
        assert len(result.cells) == 21

    def test_parses_swell_trains_largest_first(self, make_cell, make_page):
        swell_state = [
            None,
            {"height": 0.6, "period": 8, "letters": "W"},
            {"height": 1.4, "period": 15, "letters": "SSW"},
        ]

        cell = self.scraper.parse(make_page([make_cell(swell_state=swell_state)])).cells[0]

        assert [swell.height for swell in cell.swells] == [1.4, 0.6]
        assert cell.swells[0].direction == CompassDirection.SSW
        assert cell.swells[0].period == 15.0

    def test_malformed_swell_state_keeps_cell(self, make_cell, make_page):
        cell = self.scraper.parse(make_page([make_cell(swell_state=42)])).cells[0]

        assert cell.swells == []
        assert cell.wave_height == 1.5

    def test_deeply_nested_wind_payload_skips_only_that_cell(self, make_cell, make_page):
        cells = [make_cell(), make_cell(raw_wind="[" * 100000), make_cell()]

        result = self.scraper.parse(make_page(cells))

        assert [cell.index for cell in result.cells] == [0, 2]

    def test_deeply_nested_swell_state_keeps_cell(self, make_page):
        wind = json.dumps({"speed": 5, "direction": {"letters": "N"}})
        cell = (
            f"<td class=\"forecast-table-wave-height__cell\" data-wind='{wind}' "
            f"data-swell-state='{'[' * 100000}'>"
            '<div class="swell-icon__val">1.2</div>'
            '<div class="swell-icon__letters">S</div></td>'
        )

        result = self.scraper.parse(make_page([cell]))

        assert len(result.cells) == 1
        assert result.cells[0].swells == []

    def test_infinite_wind_speed_skips_cell(self, make_cell, make_page):
        cells = [make_cell(raw_wind='{"speed": 1e999, "direction": {"letters": "N"}}'), make_cell()]

        result = self.scraper.parse(make_page(cells))

        assert [cell.index for cell in result.cells] == [1]

    def test_infinite_swell_height_drops_swells(self, make_cell, make_page):
        swell_state = '[{"height": 1e999, "period": 12, "letters": "S"}]'
        page = make_page([make_cell()]).replace(
            "<td class=\"forecast-table__cell forecast-table-wave-height__cell\"",
            f"<td class=\"forecast-table__cell forecast-table-wave-height__cell\" data-swell-state='{swell_state}'",
        )

        cell = self.scraper.parse(page).cells[0]

        assert cell.swells == []
