"""
Graph: adding cities and roads, neighbor lookups.
"""

import math

import pytest

from bookingmx.models import (
    Graph,
    GraphError,
    InvalidCityNameError,
    InvalidDistanceError,
    Neighbor,
    Road,
    UnknownCityError,
)


@pytest.fixture
def ab():
    g = Graph()
    g.add_city("A")
    g.add_city("B")
    return g


class TestAddCity:

    def test_new_city_has_no_neighbors(self):
        g = Graph()
        g.add_city("GDL")
        assert "GDL" in g
        assert g.neighbors("GDL") == []

    @pytest.mark.parametrize("name", ["", "   ", None, 42, ["A"]])
    def test_rejects_invalid_names(self, name):
        g = Graph()
        with pytest.raises(InvalidCityNameError, match="Invalid city name"):
            g.add_city(name)
        assert len(g) == 0

    def test_adding_twice_is_a_noop(self, ab):
        ab.add_edge("A", "B", 5)
        ab.add_city("A")
        assert len(ab) == 2
        assert ab.neighbors("A") == [Neighbor("B", 5)]

    def test_cities_keep_insertion_order(self):
        g = Graph()
        for name in ("Zapopan", "Guadalajara", "Tonalá"):
            g.add_city(name)
        assert g.cities == ["Zapopan", "Guadalajara", "Tonalá"]


class TestAddEdge:

    def test_records_both_directions(self, ab):
        ab.add_edge("A", "B", 10)
        assert ab.neighbors("A")[0] == Neighbor(city="B", distance=10)
        assert ab.neighbors("B")[0] == Neighbor(city="A", distance=10)

    @pytest.mark.parametrize("source, target", [("A", "C"), ("C", "A"), ("C", "D")])
    def test_unknown_endpoint(self, ab, source, target):
        with pytest.raises(UnknownCityError, match="Unknown city"):
            ab.add_edge(source, target, 10)
        assert ab.neighbors("A") == []

    def test_unknown_city_reported_before_bad_distance(self, ab):
        with pytest.raises(UnknownCityError):
            ab.add_edge("A", "C", -1)

    @pytest.mark.parametrize("distance", [-5, -0.1, math.nan, math.inf, -math.inf, "10", None, True])
    def test_rejects_invalid_distances(self, ab, distance):
        with pytest.raises(InvalidDistanceError, match="Invalid distance"):
            ab.add_edge("A", "B", distance)
        assert ab.neighbors("A") == []
        assert ab.neighbors("B") == []

    def test_zero_distance_is_allowed(self, ab):
        ab.add_edge("A", "B", 0)
        assert ab.neighbors("A") == [Neighbor("B", 0)]

    def test_duplicate_roads_are_kept(self, ab):
        ab.add_edge("A", "B", 10)
        ab.add_edge("A", "B", 12)
        assert ab.neighbors("A") == [Neighbor("B", 10), Neighbor("B", 12)]
        assert ab.distance_between("A", "B") == 10

    def test_self_loop_recorded_once(self, ab):
        ab.add_edge("A", "A", 3)
        assert ab.neighbors("A") == [Neighbor("A", 3)]
        assert ab.edges() == [Road("A", "A", 3)]

    def test_errors_are_value_errors(self, ab):
        with pytest.raises(ValueError):
            ab.add_edge("A", "B", -1)
        assert issubclass(UnknownCityError, GraphError)


class TestQueries:

    def test_neighbors_unknown_city(self, ab):
        with pytest.raises(UnknownCityError):
            ab.neighbors("Z")

    def test_neighbors_in_insertion_order(self):
        g = Graph()
        for name in "ABCD":
            g.add_city(name)
        g.add_edge("A", "C", 30)
        g.add_edge("A", "B", 5)
        g.add_edge("D", "A", 1)
        assert [n.city for n in g.neighbors("A")] == ["C", "B", "D"]

    def test_neighbors_returns_a_copy(self, ab):
        ab.add_edge("A", "B", 1)
        ab.neighbors("A").clear()
        assert len(ab.neighbors("A")) == 1

    def test_edges_listed_once_in_order(self, sample_graph):
        assert sample_graph.edges() == [
            Road("Guadalajara", "Tlaquepaque", 10),
            Road("Guadalajara", "Zapopan", 15),
            Road("Guadalajara", "Tepatitlán", 80),
        ]

    def test_every_neighbor_is_a_city(self, sample_graph):
        for city in sample_graph.cities:
            for n in sample_graph.neighbors(city):
                assert n.city in sample_graph

    def test_distance_between(self, sample_graph):
        assert sample_graph.distance_between("Zapopan", "Guadalajara") == 15
        assert sample_graph.distance_between("Zapopan", "Tlaquepaque") is None
        assert sample_graph.distance_between("Zapopan", "XYZ") is None
