import pytest

from carpark.config import CarParkConfig
from carpark.errors import SlotIdFormatError
from carpark.state.car_park import CarPark
from carpark.state.models import Car, SlotType


def _ids(car_park):
    return [s.slot_id for s in car_park.list_slots()]


def _park(car_park, slot_id, registration, is_staff):
    car_park.find_slot_by_id(slot_id).park(Car(registration, "Owner", is_staff))


@pytest.mark.parametrize("staff,visitor", [(0, 0), (1, 0), (0, 2), (3, 2), (12, 10)])
def test_initialize_generates_labeled_slots(staff, visitor):
    car_park = CarPark(staff, visitor)

    expected = [f"S{i:02d}" for i in range(1, staff + 1)] + [
        f"V{i:02d}" for i in range(1, visitor + 1)
    ]
    assert _ids(car_park) == expected
    assert len(car_park) == staff + visitor
    assert all(not s.is_occupied() for s in car_park.list_slots())
    assert all(s.slot_type == SlotType.STAFF for s in car_park.list_slots()[:staff])
    assert all(s.slot_type == SlotType.VISITOR for s in car_park.list_slots()[staff:])


@pytest.mark.parametrize("staff,visitor", [(-1, 0), (0, -3), (100, 0), (1.5, 0), (True, 0)])
def test_initialize_rejects_bad_counts(staff, visitor):
    with pytest.raises(ValueError):
        CarPark(staff, visitor)


def test_from_config():
    car_park = CarPark.from_config(CarParkConfig(staff_slots=2, visitor_slots=1))
    assert _ids(car_park) == ["S01", "S02", "V01"]


def test_add_slot_appends():
    car_park = CarPark(1, 1)

    assert car_park.add_slot("A01", SlotType.VISITOR) is True
    assert _ids(car_park) == ["S01", "V01", "A01"]
    assert car_park.find_slot_by_id("A01").slot_type == SlotType.VISITOR


def test_add_duplicate_slot_rejected_and_unchanged():
    car_park = CarPark(1, 1)
    before = car_park.list_slots()

    assert car_park.add_slot("S01", SlotType.VISITOR) is False
    assert car_park.add_slot("S01", SlotType.STAFF) is False
    assert car_park.list_slots() == before
    assert car_park.find_slot_by_id("S01").slot_type == SlotType.STAFF


def test_add_malformed_slot_raises():
    car_park = CarPark(0, 0)

    with pytest.raises(SlotIdFormatError):
        car_park.add_slot("bad", SlotType.STAFF)
    assert len(car_park) == 0


def test_delete_slot():
    car_park = CarPark(2, 0)

    assert car_park.delete_slot("S01") is True
    assert _ids(car_park) == ["S02"]
    assert car_park.delete_slot("S01") is False


def test_delete_occupied_slot_never_succeeds():
    car_park = CarPark(2, 2)
    _park(car_park, "S02", "T1234", True)
    _park(car_park, "V01", "T5678", False)

    for slot in car_park.list_slots():
        if slot.is_occupied():
            assert car_park.delete_slot(slot.slot_id) is False
    assert len(car_park) == 4


def test_list_slots_is_a_copy():
    car_park = CarPark(1, 1)

    slots = car_park.list_slots()
    slots.clear()
    assert len(car_park) == 2


def test_delete_all_unoccupied_keeps_occupied_in_order():
    car_park = CarPark(3, 2)
    _park(car_park, "S02", "T1234", True)
    _park(car_park, "V02", "T5678", False)

    assert car_park.delete_all_unoccupied() is True
    assert _ids(car_park) == ["S02", "V02"]


def test_delete_all_unoccupied_when_all_occupied():
    car_park = CarPark(1, 1)
    _park(car_park, "S01", "T1234", True)
    _park(car_park, "V01", "T5678", False)

    assert car_park.delete_all_unoccupied() is False
    assert _ids(car_park) == ["S01", "V01"]


def test_delete_all_unoccupied_on_empty_registry():
    assert CarPark(0, 0).delete_all_unoccupied() is False


def test_find_slot_by_id():
    car_park = CarPark(1, 1)

    assert car_park.find_slot_by_id("V01").slot_id == "V01"
    assert car_park.find_slot_by_id("V02") is None


def test_find_slot_by_registration():
    car_park = CarPark(1, 1)
    _park(car_park, "V01", "T5678", False)

    assert car_park.find_slot_by_registration("T5678").slot_id == "V01"
    assert car_park.find_slot_by_registration("T1234") is None

    car_park.find_slot_by_id("V01").remove()
    assert car_park.find_slot_by_registration("T5678") is None


def test_counts():
    car_park = CarPark(2, 2)
    _park(car_park, "S01", "T1234", True)

    assert car_park.occupied_count() == 1
    assert car_park.available_count() == 3
