from typing import Any


def merge_record(
    current: dict[str, Any],
    payload: dict[str, Any],
    fields: tuple[str, ...],
) -> dict[str, Any]:
    """Overlay the fields present in ``payload`` on the stored ``current`` row.

    Fields absent from the payload keep their stored value. Only ``fields``
    are returned, so identifiers and unknown keys never reach the UPDATE.
    """
    return {
        field: payload[field] if field in payload else current[field]
        for field in fields
    }


def replace_record(payload: dict[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    return {field: payload[field] for field in fields}
