import json
import logging
import sys

from surf_alert.config import Config
from surf_alert.orchestrator import ForecastOrchestrator, ScrapeError


def print_summary(snapshot):
    """Print the current conditions and every flagged slot."""
    print(f"Now: {snapshot}")
    print(f"Water: {snapshot.temperature}°C")
    print(f"Good: {snapshot.is_good}  Perfect: {snapshot.is_perfect}")

    matches = snapshot.good_slots()
    if not matches:
        print("No good sessions in the next 7 days.")
        return
    for day_key, period_key, slot in matches:
        tier = "PERFECT" if slot.is_perfect else "good"
        print(f"  {day_key:<6} {period_key:<9} {tier:<8} {slot}")


def main():
    logging.basicConfig(
        level=logging.DEBUG if Config.DEBUG else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    args = [arg for arg in sys.argv[1:] if arg != "--json"]
    beach = args[0] if args else Config.TARGET_BEACH
    as_json = "--json" in sys.argv[1:]

    try:
        snapshot = ForecastOrchestrator().check_conditions(beach)
    except ScrapeError as e:
        print(f"Error: {e}")
        return 1

    if as_json:
        print(json.dumps(snapshot.to_dict(), indent=2))
    else:
        print_summary(snapshot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
