from merobase.core.sample import new_sample
from merobase.validation.audit import audit_samples


def test_clean_collection_has_no_findings(samples):
    assert audit_samples(samples[:3]) == []
    assert audit_samples([]) == []


def test_unparsable_date_is_reported(samples):
    items = audit_samples(samples)
    assert [(i.column, i.index) for i in items] == [("collectionDate", 3)]
    assert items[0].failure == "sometime in spring"


def test_duplicate_ids_are_reported():
    rows = [new_sample(sampleID="A1-1", sampleName="x"), new_sample(sampleID="A1-1", sampleName="y")]
    dupes = [i for i in audit_samples(rows) if i.column == "sampleID"]
    assert {i.index for i in dupes} == {0, 1}


def test_enum_and_range_findings():
    rows = [
        new_sample(sampleID="A1-1", sampleName="x", kingdom="Monera"),
        new_sample(sampleID="A1-2", sampleName="y", latitude=120.0, longitude=0.0, projectNumber=0),
    ]
    found = {(i.column, i.index) for i in audit_samples(rows)}
    assert found == {("kingdom", 0), ("latitude", 1), ("projectNumber", 1)}
