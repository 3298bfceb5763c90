"""
GraphService and the graphviz export.
"""

import pytest

from bookingmx.models import InvalidCityNameError, Neighbor, UnknownCityError
from bookingmx.services import GraphService, to_graphviz
from bookingmx.services.export_service import COLOR_NEARBY, COLOR_ORIGIN


@pytest.fixture
def service(sample_graph):
    return GraphService(sample_graph)


class TestGraphService:

    def test_list_cities_sorted(self, service):
        assert service.list_cities() == ["Guadalajara", "Tepatitlán", "Tlaquepaque", "Zapopan"]

    def test_add_city_strips_name(self, service):
        service.add_city("  Tonalá ")
        assert service.has_city("Tonalá")

    def test_add_city_rejects_blank(self, service):
        with pytest.raises(InvalidCityNameError):
            service.add_city("   ")

    def test_add_road_then_nearby(self, service):
        service.add_city("Tonalá")
        service.add_road("Guadalajara", "Tonalá", 17)
        assert service.nearby("Guadalajara", 20) == [
            Neighbor("Tlaquepaque", 10),
            Neighbor("Zapopan", 15),
            Neighbor("Tonalá", 17),
        ]
        assert service.distance_between("Tonalá", "Guadalajara") == 17

    def test_add_road_unknown_city(self, service):
        with pytest.raises(UnknownCityError):
            service.add_road("Guadalajara", "Tonalá", 17)

    def test_nearby_unknown_origin(self, service):
        assert service.nearby("XYZ") == []


class TestGraphvizExport:

    def test_one_edge_per_road(self, sample_graph):
        src = to_graphviz(sample_graph).source
        assert src.startswith("graph cities {")
        assert src.count(" -- ") == 3
        assert 'label="10 km"' in src
        assert 'label="80 km"' in src

    def test_every_city_is_a_node(self, sample_graph):
        src = to_graphviz(sample_graph).source
        for city in sample_graph.cities:
            assert city in src

    def test_highlight_colours_origin_and_nearby(self, sample_graph):
        src = to_graphviz(sample_graph, highlight="Guadalajara", max_distance=20).source
        assert COLOR_ORIGIN in src
        # Tlaquepaque and Zapopan: node fill plus the road to each
        assert src.count(COLOR_NEARBY) == 4

    def test_no_highlight_no_colours(self, sample_graph):
        src = to_graphviz(sample_graph).source
        assert COLOR_ORIGIN not in src
        assert COLOR_NEARBY not in src
