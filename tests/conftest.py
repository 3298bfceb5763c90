import pytest

from bookingmx.models import build_graph, sample_dataset


@pytest.fixture
def sample_data():
    """Guadalajara, Tlaquepaque, Zapopan, Tepatitlán with three roads."""
    return sample_dataset()


@pytest.fixture
def sample_graph(sample_data):
    return build_graph(sample_data["cities"], sample_data["edges"])
