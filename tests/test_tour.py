import pytest

from core.city import create_city
from core.tour import Tour


def build_tour(size: int = 6) -> Tour:
    return Tour(list(range(size)))


def test_tour_owns_its_storage():
    source = [3, 1, 2]
    tour = Tour(source)

    tour[0] = 9

    assert source == [3, 1, 2]
    assert list(tour) == [9, 1, 2]


@pytest.mark.parametrize("position", [-1, -3, 3])
def test_indexing_rejects_positions_outside_the_tour(position):
    tour = Tour([0, 1, 2])

    with pytest.raises(IndexError):
        tour[position]
    with pytest.raises(IndexError):
        tour[position] = 9
    assert list(tour) == [0, 1, 2]


def test_reverse_segment_flips_only_the_half_open_range():
    tour = build_tour()

    tour.reverse_segment(1, 4)

    assert list(tour) == [0, 3, 2, 1, 4, 5]


@pytest.mark.parametrize("start, stop", [(-1, 3), (2, 7), (4, 2)])
def test_reverse_segment_rejects_out_of_range_bounds(start, stop):
    tour = build_tour()

    with pytest.raises(IndexError):
        tour.reverse_segment(start, stop)
    assert list(tour) == list(range(6))


def test_relocate_forward_shifts_intermediate_positions_left():
    tour = build_tour()

    tour.relocate(1, 4)

    assert list(tour) == [0, 2, 3, 4, 1, 5]


def test_relocate_backward_shifts_intermediate_positions_right():
    tour = build_tour()

    tour.relocate(4, 1)

    assert list(tour) == [0, 4, 1, 2, 3, 5]


@pytest.mark.parametrize("source, target", [(6, 0), (0, 6), (-1, 2)])
def test_relocate_rejects_invalid_positions(source, target):
    tour = build_tour()

    with pytest.raises(IndexError):
        tour.relocate(source, target)


def test_edge_wraps_around_to_the_first_position():
    tour = build_tour(4)

    assert tour.edge(0) == (0, 1)
    assert tour.edge(3) == (3, 0)
    assert list(tour.edges()) == [(0, 1), (1, 2), (2, 3), (3, 0)]
    with pytest.raises(IndexError):
        tour.edge(4)


def test_copy_duplicates_order_but_shares_locations():
    cities = [create_city(i, i, 0) for i in range(4)]
    original = Tour(cities)

    clone = original.copy()
    clone.reverse_segment(0, 4)

    assert list(original) == cities
    for city in clone:
        assert any(city is other for other in cities)


def test_is_permutation_of_checks_the_multiset():
    tour = Tour([1, 2, 2, 3])

    assert tour.is_permutation_of([2, 3, 1, 2])
    assert not tour.is_permutation_of([1, 2, 3])
    assert not tour.is_permutation_of([1, 2, 3, 3])


def test_empty_tour():
    tour = Tour()

    assert tour.is_empty()
    assert len(tour) == 0
    assert str(tour) == ""
