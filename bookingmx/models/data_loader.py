from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .builder import build_graph
from .errors import DatasetError
from .graph import Graph
from .sample_data import sample_dataset
from .validation import validate_graph_data

log = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[2] / "data" / "cities.json"


# ------------------ Reading datasets ------------------

def _read_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a JSON object with 'cities' and 'edges'")

    return {
        "cities": list(raw.get("cities", [])),
        "edges": list(raw.get("edges", [])),
    }


def _read_csv(path: Path) -> Dict[str, Any]:
    """
    CSV with columns source,target,distance_km – one road per row.
    Cities are taken from both endpoint columns in first-seen order.
    """
    cities: List[str] = []
    seen = set()
    edges: List[Dict[str, Any]] = []

    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            a = row["source"].strip()
            b = row["target"].strip()
            try:
                w: Any = float(row["distance_km"])
            except (TypeError, ValueError):
                # left for the validator to report as an invalid distance
                w = row["distance_km"]

            for city in (a, b):
                if city not in seen:
                    seen.add(city)
                    cities.append(city)

            edges.append({"from": a, "to": b, "distance": w})

    return {"cities": cities, "edges": edges}


def read_dataset(path: Path) -> Dict[str, Any]:
    """
    Reads a raw, unvalidated dataset from .json or .csv.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        return _read_json(path)
    if suffix == ".csv":
        return _read_csv(path)
    raise ValueError(f"Unsupported dataset format: {path.suffix or path.name}")


# ------------------ Loading the graph ------------------

def load_graph(data_file: Optional[Path] = None) -> Graph:
    """
    Reads, validates and builds the city graph.
    Without an explicit file the bundled data/cities.json is used, and if it
    is missing too, the built-in sample dataset.
    """
    if data_file is None:
        data_file = DEFAULT_DATA_FILE
        if not data_file.exists():
            log.warning("%s not found, using the built-in sample dataset", data_file)
            return _validated_build(sample_dataset(), source="sample dataset")

    data = read_dataset(data_file)
    return _validated_build(data, source=data_file)


def _validated_build(data: Dict[str, Any], source: object) -> Graph:
    result = validate_graph_data(data)
    if not result.ok:
        log.error("Dataset %s rejected: %s", source, result.reason)
        raise DatasetError(result.reason, source=source)

    graph = build_graph(data["cities"], data["edges"])
    log.info("Loaded %d cities and %d roads from %s", len(graph), len(graph.edges()), source)
    return graph
