"""Riyadh weather card for the terminal or a PNG file."""
import argparse
import logging
import os
import signal
import sys
from typing import List, Optional

from dotenv import load_dotenv

from canvas import Canvas, PILCanvas, TerminalCanvas
from openweather_provider import OpenWeatherProvider
from widget import WeatherWidget

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_PNG_PATH = os.path.join(BASE_DIR, "weather-card.png")
API_KEY_ENV = "OPENWEATHER_API_KEY"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("Weather widget")
    parser.add_argument("--lang", choices=["en", "ar"], default="en", help="Starting language")
    parser.add_argument("--output", choices=["terminal", "png"], default="terminal")
    parser.add_argument("--png-path", default=DEFAULT_PNG_PATH)
    parser.add_argument("--font", default=None, help="TrueType font for PNG output")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--once", action="store_true", help="Fetch, render and exit")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers
    )


def load_config() -> str:
    load_dotenv()
    api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        raise SystemExit(f"Missing {API_KEY_ENV} in environment")
    logging.info("Configuration loaded")
    return api_key


def build_canvas(args: argparse.Namespace) -> Canvas:
    if args.output == "png":
        return PILCanvas(path=args.png_path, font_path=args.font, timeout=args.timeout)
    return TerminalCanvas()


def build_widget(api_key: str, canvas: Canvas, args: argparse.Namespace) -> WeatherWidget:
    provider = OpenWeatherProvider(api_key=api_key, timeout=args.timeout)
    widget = WeatherWidget(provider, on_change=lambda state: widget.render(canvas))
    logging.info("Weather widget ready (lat=%s lon=%s)", provider.lat, provider.lon)
    return widget


def interactive_loop(widget: WeatherWidget, canvas: Canvas) -> None:
    """Read commands from stdin: t toggles the language, q quits, Enter redraws."""
    while True:
        try:
            command = input().strip().lower()
        except EOFError:
            return
        if command == "q":
            return
        if command == "t":
            widget.toggle()
        else:
            widget.render(canvas)


def signal_handler(signum, frame):
    logging.info("Received signal %s, shutting down", signum)
    raise KeyboardInterrupt()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    api_key = load_config()

    canvas = build_canvas(args)
    widget = build_widget(api_key, canvas, args)

    signal.signal(signal.SIGTERM, signal_handler)

    try:
        pending = widget.mount()
        if args.lang == "ar":
            pending = widget.toggle()
        if args.once:
            pending.result()
            return
        interactive_loop(widget, canvas)
    except KeyboardInterrupt:
        logging.info("Stopping widget")
    finally:
        widget.close()


if __name__ == "__main__":
    main()
