# merobase/schemas/sample_table.py
import pandera.pandas as pa
from pandera.pandas import Check, Column, DataFrameSchema

from merobase.core.sample import KINGDOMS, PROJECT_TYPES
from merobase.validation.checks import is_iso_date

# Frames are built with dtype=object so values keep their JSON types; checks are element-wise.

def _whole(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and v >= 1

def _within(bound):
    def _check(v) -> bool:
        return isinstance(v, (int, float)) and not isinstance(v, bool) and -bound <= v <= bound
    return _check

_text = Check(lambda v: isinstance(v, str), element_wise=True, name="is_text")

schema = DataFrameSchema({
    "sampleID": Column(checks=_text, nullable=False, unique=True),
    "sampleName": Column(checks=_text, nullable=True),
    "kingdom": Column(checks=Check.isin(KINGDOMS), nullable=True),
    "projectType": Column(checks=Check.isin(PROJECT_TYPES), nullable=True),
    "projectNumber": Column(checks=Check(_whole, element_wise=True, name="positive_int"), nullable=True),
    "sampleNumber": Column(checks=Check(_whole, element_wise=True, name="positive_int"), nullable=True),
    "collectionDate": Column(checks=Check(is_iso_date, element_wise=True, name="iso_date"), nullable=True),
    "latitude": Column(checks=Check(_within(90), element_wise=True, name="latitude_range"), nullable=True),
    "longitude": Column(checks=Check(_within(180), element_wise=True, name="longitude_range"), nullable=True),
})
