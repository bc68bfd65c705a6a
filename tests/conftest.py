# ABOUTME: Shared fixtures for scraper, normalizer and orchestrator tests
# ABOUTME: Builds forecast page markup in the shape the scraper expects

import json

import pytest


def wave_cell(height="1.5", letters="SW", wind=None, swell_state=None, raw_wind=None):
    """Markup for one wave-height cell"""
    if raw_wind is not None:
        wind_attr = f" data-wind='{raw_wind}'"
    elif wind is False:
        wind_attr = ""
    else:
        payload = wind or {"speed": 10, "direction": {"letters": "N"}}
        wind_attr = f" data-wind='{json.dumps(payload)}'"
    swell_attr = f" data-swell-state='{json.dumps(swell_state)}'" if swell_state is not None else ""
    height_html = f'<div class="swell-icon__val">{height}</div>' if height is not None else ""
    return (
        f'<td class="forecast-table__cell forecast-table-wave-height__cell"{wind_attr}{swell_attr}>'
        f'{height_html}<div class="swell-icon__letters">{letters}</div></td>'
    )


def forecast_page(cells, periods=None, stars=3, temperature="17.5°C"):
    """Markup for a whole six-day forecast page"""
    periods = periods if periods is not None else [14] * len(cells)
    period_cells = "".join(
        f'<td class="forecast-table__cell"><strong>{p}</strong></td>' for p in periods
    )
    star_imgs = '<img src="star.png">' * stars
    temperature_html = (
        f"<div>The sea temperature is {temperature}</div>" if temperature else ""
    )
    return f"""
    <html><body>
      <table class="forecast-table">
        <tbody>
          <tr><td>Rating</td><td>{star_imgs}</td></tr>
          <tr class="forecast-table__row" data-row-name="wave-height">{''.join(cells)}</tr>
          <tr class="forecast-table__row" data-row-name="periods">{period_cells}</tr>
        </tbody>
      </table>
      {temperature_html}
    </body></html>
    """


@pytest.fixture
def full_page():
    return forecast_page([wave_cell() for _ in range(21)])


@pytest.fixture
def make_cell():
    return wave_cell


@pytest.fixture
def make_page():
    return forecast_page
