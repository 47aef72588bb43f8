import math

import pytest

from core.city import City, coordinates_by_id, create_city
from physics.distance import (
    DistanceMatrix,
    create_distance_matrix,
    euclidean_distance,
    get_metric,
    manhattan_distance,
    rounded_euclidean_distance,
)


def test_basic_metrics():
    assert euclidean_distance(0, 0, 3, 4) == pytest.approx(5.0)
    assert manhattan_distance(0, 0, 3, -4) == pytest.approx(7.0)


@pytest.mark.parametrize(
    "point, expected",
    [((3, 4), 5), ((1, 1), 1), ((1, 2), 2), ((2, 3), 4), ((0, 0), 0)],
)
def test_rounded_euclidean_uses_nearest_integer(point, expected):
    value = rounded_euclidean_distance(0, 0, *point)

    assert value == expected
    assert isinstance(value, int)


def test_get_metric_rejects_unknown_names():
    assert get_metric("manhattan") is manhattan_distance
    with pytest.raises(ValueError):
        get_metric("chebyshev")


def test_city_rejects_negative_ids():
    with pytest.raises(ValueError):
        City(city_id=-1, coordinates=(0.0, 0.0))


def test_city_distance_uses_its_metric():
    a = create_city(0, 0, 0)
    b = create_city(1, 1, 1)
    a_rounded = create_city(0, 0, 0, metric=rounded_euclidean_distance)

    assert a.distance_to(b) == pytest.approx(math.sqrt(2))
    assert a_rounded.distance_to(b) == 1
    # The metric does not take part in equality.
    assert a == a_rounded


def test_distance_matrix_is_symmetric_with_zero_diagonal():
    coordinates = {0: (0.0, 0.0), 5: (3.0, 4.0), 9: (6.0, 8.0)}
    dm = DistanceMatrix(coordinates)

    assert dm.node_ids == [0, 5, 9]
    assert len(dm) == 3
    for i in coordinates:
        assert dm.get_distance(i, i) == 0.0
        for j in coordinates:
            assert dm.get_distance(i, j) == dm.get_distance(j, i)
    assert dm(0, 9) == pytest.approx(10.0)


def test_distance_matrix_unknown_id_raises_key_error():
    dm = DistanceMatrix({0: (0.0, 0.0), 1: (1.0, 0.0)})

    with pytest.raises(KeyError):
        dm.get_distance(0, 2)


def test_create_distance_matrix_from_cities():
    cities = [create_city(0, 0, 0), create_city(1, 1, 2)]

    dm = create_distance_matrix(coordinates_by_id(cities), metric="rounded")

    assert dm.get_distance(0, 1) == 2.0
