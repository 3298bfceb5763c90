import math

import pytest

from bookingmx.models import Neighbor, get_nearby_cities
from bookingmx.models.layout import radial_layout


def test_origin_only():
    assert radial_layout("A", []) == {"A": (0.0, 0.0)}


def test_first_neighbor_is_straight_up(sample_graph):
    neighbors = get_nearby_cities(sample_graph, "Guadalajara")
    positions = radial_layout("Guadalajara", neighbors, radius=250, min_radius=60)

    assert positions["Guadalajara"] == (0.0, 0.0)
    x, y = positions["Tlaquepaque"]
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(-60.0)


def test_farthest_neighbor_on_outer_ring(sample_graph):
    neighbors = get_nearby_cities(sample_graph, "Guadalajara")
    positions = radial_layout("Guadalajara", neighbors, radius=250, min_radius=60)
    assert math.hypot(*positions["Tepatitlán"]) == pytest.approx(250.0)
    # 15 km scales below min_radius and is clamped
    assert math.hypot(*positions["Zapopan"]) == pytest.approx(60.0)


def test_zero_distances_are_clamped():
    positions = radial_layout("O", [Neighbor("A", 0), Neighbor("B", 0)], min_radius=40)
    assert math.hypot(*positions["A"]) == pytest.approx(40.0)
    assert math.hypot(*positions["B"]) == pytest.approx(40.0)


def test_parallel_roads_place_city_once():
    positions = radial_layout("O", [Neighbor("A", 5), Neighbor("A", 9), Neighbor("O", 1)])
    assert set(positions) == {"O", "A"}
    assert positions["O"] == (0.0, 0.0)
