"""
Record Serialization
====================

Renders decoded records as a JSON document: one array holding an object
per record, with the keys ``length``, ``load_offset``, ``type``, ``data``
and ``checksum``. ``data`` is an array of byte values.

Compact output:
    [{"length":0,"load_offset":0,"type":1,"data":[],"checksum":255}]
"""

from typing import Any, Iterable, Optional
import json

from xinto.config import OutputConfig
from xinto.ihex.records import Record


def records_to_list(records: Iterable[Record]) -> list[dict[str, Any]]:
    """Convert records to a list of plain dictionaries."""
    return [record.to_dict() for record in records]


def records_to_json(records: Iterable[Record],
                    config: Optional[OutputConfig] = None) -> str:
    """
    Render records as a JSON array.

    Args:
        records: The records to render, in order
        config: Output settings (default: compact)

    Returns:
        The JSON document, without a trailing newline
    """
    config = config or OutputConfig()
    if config.pretty:
        return json.dumps(records_to_list(records), indent=config.json_indent)
    return json.dumps(records_to_list(records), separators=(",", ":"))
