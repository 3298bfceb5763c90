"""
build_graph and get_nearby_cities on the sample dataset.
"""

import pytest

from bookingmx.models import (
    EdgeData,
    Graph,
    InvalidDistanceError,
    Neighbor,
    build_graph,
    get_nearby_cities,
)


class TestBuildGraph:

    def test_all_cities_and_edges(self, sample_data, sample_graph):
        assert len(sample_graph) == len(sample_data["cities"])
        assert sample_graph.cities == sample_data["cities"]
        assert len(sample_graph.neighbors("Guadalajara")) == 3
        assert sample_graph.neighbors("Zapopan") == [Neighbor("Guadalajara", 15)]

    def test_accepts_edge_data(self):
        g = build_graph(["A", "B"], [EdgeData("A", "B", 4)])
        assert g.neighbors("B") == [Neighbor("A", 4)]

    def test_cities_without_edges(self):
        g = build_graph(["A", "B"], [])
        assert g.neighbors("A") == []
        assert g.neighbors("B") == []

    def test_does_not_revalidate(self):
        with pytest.raises(InvalidDistanceError):
            build_graph(["A", "B"], [{"from": "A", "to": "B", "distance": -1}])

    def test_edge_data_mapping(self):
        edge = EdgeData.from_mapping({"from": "A", "to": "B", "distance": 3})
        assert edge == EdgeData("A", "B", 3)
        assert edge.to_mapping() == {"from": "A", "to": "B", "distance": 3}


class TestNearbyCities:

    def test_sorted_by_distance(self, sample_graph):
        result = get_nearby_cities(sample_graph, "Guadalajara", 100)
        assert result[0] == Neighbor(city="Tlaquepaque", distance=10)
        assert [n.distance for n in result] == [10, 15, 80]

    def test_respects_max_distance(self, sample_graph):
        cities = [n.city for n in get_nearby_cities(sample_graph, "Guadalajara", 20)]
        assert "Tlaquepaque" in cities
        assert "Zapopan" in cities
        assert "Tepatitlán" not in cities

    def test_max_distance_is_inclusive(self, sample_graph):
        cities = [n.city for n in get_nearby_cities(sample_graph, "Guadalajara", 15)]
        assert cities == ["Tlaquepaque", "Zapopan"]

    def test_unbounded_by_default(self, sample_graph):
        assert len(get_nearby_cities(sample_graph, "Guadalajara")) == 3

    def test_unknown_origin_gives_empty_list(self, sample_graph):
        assert get_nearby_cities(sample_graph, "XYZ") == []
        assert get_nearby_cities(Graph(), "XYZ", 10) == []

    @pytest.mark.parametrize("not_a_graph", [{}, None, "graph", {"cities": []}])
    def test_rejects_non_graph(self, not_a_graph):
        with pytest.raises(TypeError, match="graph must be Graph"):
            get_nearby_cities(not_a_graph, "A")

    def test_one_hop_only(self, sample_graph):
        result = get_nearby_cities(sample_graph, "Zapopan")
        assert result == [Neighbor("Guadalajara", 15)]

    def test_ties_keep_insertion_order(self):
        g = build_graph(
            ["O", "X", "Y", "Z"],
            [
                {"from": "O", "to": "Y", "distance": 5},
                {"from": "O", "to": "Z", "distance": 1},
                {"from": "O", "to": "X", "distance": 5},
            ],
        )
        assert [n.city for n in get_nearby_cities(g, "O")] == ["Z", "Y", "X"]

    def test_does_not_mutate_graph(self, sample_graph):
        before = sample_graph.neighbors("Guadalajara")
        get_nearby_cities(sample_graph, "Guadalajara", 20)
        assert sample_graph.neighbors("Guadalajara") == before
