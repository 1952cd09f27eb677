import pytest

from enigmaar.housesystems import HouseSystem, all_house_systems, house_system_data


def test_all_house_systems_in_enum_order():
    assert [item.key for item in all_house_systems()] == list(HouseSystem)


def test_supported_codes_are_unique_single_characters():
    codes = [item.code for item in all_house_systems() if item.se_supported]
    assert len(set(codes)) == len(codes)
    assert all(len(code) == 1 for code in codes)


def test_only_none_is_unsupported():
    unsupported = [item.key for item in all_house_systems() if not item.se_supported]
    assert unsupported == [HouseSystem.NONE]


def test_counter_clockwise_follows_support():
    assert all(item.counter_clockwise == item.se_supported for item in all_house_systems())


def test_number_of_houses():
    numbers = {item.key: item.number for item in all_house_systems()}
    assert numbers[HouseSystem.NONE] == 0
    assert numbers[HouseSystem.GAUQUELIN] == 36
    others = [n for key, n in numbers.items() if key not in (HouseSystem.NONE, HouseSystem.GAUQUELIN)]
    assert set(others) == {12}


def test_placidus_lookup():
    data = house_system_data(HouseSystem.PLACIDUS)
    assert data.code == "P"
    assert data.text_id == "r_hs_placidus"
    assert data.quadrant is True


def test_morin_is_not_quadrant():
    assert house_system_data(HouseSystem.MORIN).quadrant is False


def test_sunshine_codes_differ_by_case():
    assert house_system_data(HouseSystem.SUN_SHINE).code == "i"
    assert house_system_data(HouseSystem.SUN_SHINE_TREINDL).code == "I"


def test_lookup_unknown_raises():
    with pytest.raises(ValueError):
        house_system_data(len(HouseSystem))