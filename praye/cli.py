import argparse
import json
import logging
import sys
from datetime import date

from .calc import PrayerManager
from .config import CONFIG_PATH, load_config, method_from_config
from .methods import METHODS, HighLatMethod


def resolve_coordinates(args, config):
    if (args.lat is None) != (args.lng is None):
        raise ValueError("--lat and --lng go together")
    if args.lat is not None:
        return float(args.lat), float(args.lng), float(args.alt or 0)
    loc = config.get("location") or {}
    if "lat" in loc and "lng" in loc:
        return float(loc["lat"]), float(loc["lng"]), float(loc.get("alt", 0))
    raise ValueError("No coordinates: pass --lat and --lng or set a location in the config")


def handle_cli(args):
    if args.list_methods:
        for key in METHODS:
            print(f"{key}: {METHODS[key]['name']}")
        return 0

    config = load_config(args.config or CONFIG_PATH)
    if args.method:
        config["method"] = args.method
    if args.ramadan:
        config["ramadan"] = True
    if args.asr:
        config["asr_method"] = args.asr
    if args.high_lat:
        config["high_lat_method"] = args.high_lat

    coords = resolve_coordinates(args, config)
    day = date.fromisoformat(args.date) if args.date else date.today()

    manager = PrayerManager(method_from_config(config), config.get("high_lat_method"))
    times = manager.get_times(day, coords)
    print(json.dumps(times.as_dict(), indent=2))
    return 0


def build_arg_parser():
    parser = argparse.ArgumentParser(description="Compute prayer times as fractional hours")
    parser.add_argument("--list-methods", action="store_true", help="List calculation methods")
    parser.add_argument("--lat", type=float, help="Latitude in degrees")
    parser.add_argument("--lng", type=float, help="Longitude in degrees")
    parser.add_argument("--alt", type=float, default=0.0, help="Altitude in meters (default 0)")
    parser.add_argument("--date", help="Date as YYYY-MM-DD (default today)")
    parser.add_argument("--method", help="Calculation method, see --list-methods")
    parser.add_argument("--ramadan", action="store_true", help="Use the Ramadan isha interval (Makkah)")
    parser.add_argument("--asr", type=str.capitalize, choices=["Standard", "Hanafi"], help="Asr juristic method")
    parser.add_argument(
        "--high-lat",
        choices=[m.value for m in HighLatMethod],
        help="Adjustment for higher latitudes"
    )
    parser.add_argument("--config", help=f"Config file (default {CONFIG_PATH})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        return handle_cli(args)
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
