from dataclasses import dataclass

from slink.types import RecordDict


# Persisted field name for every model attribute (slot format, must stay stable)
FIELD_NAMES = {
    'id': 'id',
    'original': 'original',
    'short_url': 'short',
    'shortcode': 'code',
    'created_at': 'created',
    'clicks': 'clicks',
}


@dataclass(frozen=True)
class ShortLinkRecord:
    """Represent one entry of the shortening history.

    Records are created by HistoryStore.add() and never mutated afterwards.

    Attributes:
        id (int):
            Identifier unique among the records currently in the store.
            Used for deletion.
        original (str):
            The original absolute http(s) URL that was shortened.
        short_url (str):
            Public short URL, i.e. the short URL base followed by the shortcode.
        shortcode (str):
            Output of generate_shortcode(original). Never empty.
        created_at (str):
            ISO-8601 UTC creation timestamp, e.g. '2025-10-15T12:00:00.000Z'.
        clicks (int):
            Opaque, non-negative display counter supplied by the caller.

    Example:
        >>> record = ShortLinkRecord(
        ...     id=1760529600000,
        ...     original='https://example.com',
        ...     short_url='https://slink.to/ags5vy',
        ...     shortcode='ags5vy',
        ...     created_at='2025-10-15T12:00:00.000Z',
        ...     clicks=0,
        ... )
        >>> record.to_dict()['code']
        'ags5vy'
    """

    id: int
    original: str
    short_url: str
    shortcode: str
    created_at: str
    clicks: int = 0

    def to_dict(self) -> RecordDict:
        """Return the JSON-ready representation using the persisted field names."""
        return {persisted: getattr(self, attribute) for attribute, persisted in FIELD_NAMES.items()}

    @classmethod
    def from_dict(cls, data: RecordDict) -> 'ShortLinkRecord':
        """Build a record from its persisted representation

        Args:
            data (dict[str, Any]):
                Decoded JSON object with the persisted field names.

        Returns:
            ShortLinkRecord: the decoded record.

        Raises:
            TypeError:
                If data is not a dict or a field holds a value of the wrong JSON type.
            KeyError:
                If a field is missing.
            ValueError:
                If clicks is negative.
        """
        if not isinstance(data, dict):
            raise TypeError(f'Record must be a JSON object (given type: {type(data)}).')

        values = {attribute: data[persisted] for attribute, persisted in FIELD_NAMES.items()}

        # NOTE: bool is a subclass of int, but true/false are not valid ids or counters
        for attribute in ('id', 'clicks'):
            value = values[attribute]
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"Field '{attribute}' must be an integer (given type: {type(value)}).")
        for attribute in ('original', 'short_url', 'shortcode', 'created_at'):
            value = values[attribute]
            if not isinstance(value, str):
                raise TypeError(f"Field '{attribute}' must be a string (given type: {type(value)}).")
        if values['clicks'] < 0:
            raise ValueError(f"Field 'clicks' must be non-negative (given value: {values['clicks']}).")

        return cls(**values)
