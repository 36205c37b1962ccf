import pytest

from wator.creature import Fish, Shark, creature_from_dict, is_breeding_age
from wator.data_types import CellState


def test_kinds():
    assert Fish().kind == CellState.FISH
    assert Shark(health=3).kind == CellState.SHARK


def test_breeding_age():
    assert not is_breeding_age(Fish(age=0), 3)
    assert not is_breeding_age(Fish(age=2), 3)
    assert is_breeding_age(Fish(age=3), 3)
    assert is_breeding_age(Shark(health=1, age=6), 3)
    assert not is_breeding_age(Shark(health=1, age=7), 3)


def test_shark_round_trip():
    shark = Shark(health=4, age=9, last_acted_tick=12)
    data = shark.to_dict()
    assert data == {'kind': 'SHARK', 'age': 9, 'last_acted_tick': 12, 'health': 4}
    assert creature_from_dict(data) == shark


def test_fish_from_dict_defaults():
    assert creature_from_dict({'kind': 'FISH'}) == Fish()


def test_unknown_kind():
    with pytest.raises(ValueError):
        creature_from_dict({'kind': 'WHALE'})
