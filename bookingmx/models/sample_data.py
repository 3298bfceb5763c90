from __future__ import annotations

import copy
from typing import Any, Dict

# Guadalajara metropolitan area, distances in km
SAMPLE_DATASET: Dict[str, Any] = {
    "cities": ["Guadalajara", "Tlaquepaque", "Zapopan", "Tepatitlán"],
    "edges": [
        {"from": "Guadalajara", "to": "Tlaquepaque", "distance": 10},
        {"from": "Guadalajara", "to": "Zapopan", "distance": 15},
        {"from": "Guadalajara", "to": "Tepatitlán", "distance": 80},
    ],
}


def sample_dataset() -> Dict[str, Any]:
    """Fresh copy of SAMPLE_DATASET that the caller may modify."""
    return copy.deepcopy(SAMPLE_DATASET)
