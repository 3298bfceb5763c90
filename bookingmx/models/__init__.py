from .builder import EdgeData, build_graph
from .errors import (
    DatasetError,
    GraphError,
    InvalidCityNameError,
    InvalidDistanceError,
    UnknownCityError,
)
from .graph import Graph, Neighbor, Road
from .nearby import get_nearby_cities
from .sample_data import SAMPLE_DATASET, sample_dataset
from .validation import ValidationResult, validate_graph_data

__all__ = [
    "DatasetError",
    "EdgeData",
    "Graph",
    "GraphError",
    "InvalidCityNameError",
    "InvalidDistanceError",
    "Neighbor",
    "Road",
    "SAMPLE_DATASET",
    "UnknownCityError",
    "ValidationResult",
    "build_graph",
    "get_nearby_cities",
    "sample_dataset",
    "validate_graph_data",
]
