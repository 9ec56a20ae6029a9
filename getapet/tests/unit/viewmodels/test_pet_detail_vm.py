from __future__ import annotations

from getapet.viewmodels.pet_detail_vm import PetDetailVM


def test_detail_exposes_display_fields(milo) -> None:
    vm = PetDetailVM(milo)

    assert vm.title == "Milo"
    assert vm.subtitle == "2 years old"
    assert vm.category_label == "Cats"
    assert vm.image_name == "milo"
    assert vm.can_adopt is True
    assert vm.status_text == "Milo is waiting for adoption."


def test_adopt_fires_callback_at_most_once(milo) -> None:
    adopted = []
    vm = PetDetailVM(milo, on_adopted=adopted.append)

    assert vm.cmd_adopt() is True
    assert vm.cmd_adopt() is False

    assert adopted == [milo]
    assert vm.is_adopted is True
    assert vm.status_text == "Milo has found a home."


def test_already_adopted_pet_cannot_be_adopted_again(milo) -> None:
    adopted = []
    vm = PetDetailVM(milo, is_adopted=True, on_adopted=adopted.append)

    assert vm.can_adopt is False
    assert vm.cmd_adopt() is False
    assert adopted == []


def test_adopt_without_listener_still_updates_state(milo) -> None:
    vm = PetDetailVM(milo)

    assert vm.cmd_adopt() is True
    assert vm.is_adopted is True
