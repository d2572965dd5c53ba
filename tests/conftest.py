import itertools
import pytest

from merobase.core.storage import MemoryStorage
from merobase.core.store import RecordStore
from merobase.core.sample import new_sample


def make_clock():
    ticks = itertools.count(1)
    return lambda: f"2025-10-10T08:00:{next(ticks):02d}Z"


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return RecordStore(storage, key="mero_samples", clock=make_clock())


@pytest.fixture
def coral():
    return {"projectType": "A", "projectNumber": 12, "sampleNumber": 3, "sampleName": "Coral X"}


@pytest.fixture
def samples():
    return [
        new_sample(sampleID="A1-1", sampleName="Reef coral", genus="Acropora", species="tenuis",
                   kingdom="Animalia", projectType="A", projectNumber=1, sampleNumber=1,
                   collectionDate="2025-01-10"),
        new_sample(sampleID="A1-2-SEM", sampleName="Bracket", genus="Ganoderma", family="Polyporaceae",
                   kingdom="Fungi", projectType="A", projectNumber=1, sampleNumber=2,
                   collectionDate="2025-02-15", semPhoto="blob:sem"),
        new_sample(sampleID="B2-1", sampleName="Mold", genus="Penicillium",
                   kingdom="Fungi", projectType="B", projectNumber=2, sampleNumber=1,
                   collectionDate="2025-03-20"),
        new_sample(sampleID="B2-2-ISO", sampleName="Seagrass", genus="Enhalus",
                   kingdom="Plantae", projectType="B", projectNumber=2, sampleNumber=2,
                   collectionDate="sometime in spring", isolatedPhoto="blob:iso"),
    ]
