from __future__ import annotations

from typing import List

import pytest

from getapet.domain.catalog import PetCatalog
from getapet.domain.entities import Category, Pet
from getapet.viewmodels.explorer_vm import ExplorerVM
from getapet.viewmodels.list_model import ListPatch


REX = Pet(name="Rex", age=3, image_name="rex", category=Category.DOGS)
MILO = Pet(name="Milo", age=2, image_name="milo", category=Category.CATS)


@pytest.fixture
def rex() -> Pet:
    return REX


@pytest.fixture
def milo() -> Pet:
    return MILO


@pytest.fixture
def tiny_catalog() -> PetCatalog:
    """Dogs=[Rex], Cats=[Milo]; the other categories are empty."""
    return PetCatalog({Category.DOGS: [REX], Category.CATS: [MILO]})


@pytest.fixture
def patches() -> List[ListPatch]:
    return []


@pytest.fixture
def explorer(tiny_catalog: PetCatalog, patches: List[ListPatch]) -> ExplorerVM:
    opened = []
    vm = ExplorerVM(tiny_catalog, on_patch=patches.append, on_open_detail=opened.append)
    vm.opened = opened
    vm.load()
    return vm
