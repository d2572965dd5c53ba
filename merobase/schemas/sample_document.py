# merobase/schemas/sample_document.py
# Structural shape of the stored slot: a JSON array of sample objects.
# Legacy keys (id, name, date, location) are allowed through; field rules live in core/schema.py.

_TEXT = {"type": ["string", "null"]}
_NUMBER_OR_TEXT = {"type": ["number", "string", "null"]}

DOCUMENT_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "MEROBase sample collection",
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "sampleID": _TEXT,
            "sampleName": _TEXT,
            "species": _TEXT,
            "genus": _TEXT,
            "family": _TEXT,
            "kingdom": _TEXT,
            "projectType": _TEXT,
            "projectNumber": _NUMBER_OR_TEXT,
            "sampleNumber": _NUMBER_OR_TEXT,
            "collectionDate": _TEXT,
            "latitude": _NUMBER_OR_TEXT,
            "longitude": _NUMBER_OR_TEXT,
            "samplePhoto": _TEXT,
            "semPhoto": _TEXT,
            "isolatedPhoto": _TEXT,
            "lastUpdated": _TEXT,
        },
        "additionalProperties": True,
    },
}
