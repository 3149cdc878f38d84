"""JSON (de)serialization of the shortening history slot

The slot holds a single JSON array of record objects, most recent first.
Order is significant and preserved in both directions.

Functions:
    encode_history(records) -> str
        Serialize records to the slot format.
    decode_history(raw) -> list[ShortLinkRecord]
        Deserialize the slot format, raising CorruptHistoryError on bad data.
"""

import json
from collections.abc import Iterable

from slink.models import ShortLinkRecord
from slink.dao.exceptions import CorruptHistoryError


def encode_history(records: Iterable[ShortLinkRecord]) -> str:
    """Serialize records into a JSON array, keeping their order.

    Example:
        >>> encode_history([])
        '[]'
    """
    return json.dumps([record.to_dict() for record in records], ensure_ascii=True, separators=(',', ':'))


def decode_history(raw: str | None) -> list[ShortLinkRecord]:
    """Deserialize a JSON array of records, keeping their order.

    An absent slot (None) decodes to an empty list.

    Args:
        raw (str | None):
            Raw slot content.

    Returns:
        list[ShortLinkRecord]: The decoded records.

    Raises:
        CorruptHistoryError:
            If the content is not valid JSON, not a JSON array, or holds an
            element that is not a well-formed record.
    """
    if raw is None:
        return []

    try:
        document = json.loads(raw)
    except (ValueError, TypeError, RecursionError) as e:
        # RecursionError: arrays nested deeper than the interpreter stack
        raise CorruptHistoryError('History slot does not hold valid JSON.') from e

    if not isinstance(document, list):
        raise CorruptHistoryError(f'History slot does not hold a JSON array (found: {type(document).__name__}).')

    records = []
    for position, item in enumerate(document):
        try:
            records.append(ShortLinkRecord.from_dict(item))
        except (KeyError, TypeError, ValueError) as e:
            raise CorruptHistoryError(f'History entry #{position} is malformed: {e}') from e
    return records
