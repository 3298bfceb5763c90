"""
Renders the city graph to an image with graphviz.

Usage:
    python scheme_city_graph.py [DATASET] [--origin CITY] [--max-distance KM]

Without DATASET the bundled data/cities.json is used.
"""
import argparse
import logging
from pathlib import Path

from bookingmx.config import Settings
from bookingmx.logging_config import configure
from bookingmx.models.data_loader import load_graph
from bookingmx.services import render_graph

log = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("dataset", nargs="?", type=Path)
    parser.add_argument("--origin", help="city to highlight with its nearby cities")
    parser.add_argument("--max-distance", type=float, default=None)
    parser.add_argument("--out", type=Path, default=Path("city_graph"))
    parser.add_argument("--format", default="png")
    args = parser.parse_args()

    settings = Settings.from_env()
    configure(settings.log_level)

    graph = load_graph(args.dataset or settings.data_file)
    out = render_graph(
        graph,
        args.out,
        fmt=args.format,
        highlight=args.origin,
        max_distance=args.max_distance,
    )
    print(f"Diagram saved as {out}")


if __name__ == "__main__":
    main()
