"""File-backed slot storage on the local device

Each slot is a single UTF-8 file '<data_dir>/<key>.json'. Writes go to a
sibling '.tmp' file which is flushed, fsynced and then moved over the slot
file with os.replace(), so readers never observe a partial write.

Classes:
    FileSlotDAO:
        Slot DAO persisting to the local filesystem.

Example:
    >>> slot = FileSlotDAO(key='slink_history', data_dir='~/.slink')
    >>> slot.write('[]')
    >>> slot.read()
    '[]'
    >>> slot.path
    PosixPath('/home/user/.slink/slink_history.json')
"""

import os
import logging
from pathlib import Path

from slink.dao.base import SlotBaseDAO
from slink.dao.exceptions import DataStoreError, CorruptHistoryError


logger = logging.getLogger(__name__)


class FileSlotDAO(SlotBaseDAO):
    """Slot storage persisted as one JSON file per slot

    Attributes:
        key (str):
            Name of the slot, also the file stem.
        path (Path):
            Absolute path of the slot file.
    """

    def __init__(self, key: str, data_dir: str | os.PathLike):
        super().__init__(key)
        if os.sep in key or (os.altsep and os.altsep in key) or key in {'.', '..'}:
            raise ValueError(f'Slot key must not contain path separators (given value: {key!r}).')

        self.path = Path(data_dir).expanduser().resolve() / f'{key}.json'

    def read(self) -> str | None:
        try:
            return self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            raise CorruptHistoryError(f"History slot at {self.path} is not valid UTF-8 text.") from e
        except OSError as e:
            raise DataStoreError(f"Can't read history slot at {self.path}.") from e

    def write(self, raw: str) -> None:
        tmp_path = self.path.with_name(f'{self.path.name}.tmp')
        try:
            # Encode first: text that is not valid Unicode never reaches the disk
            data = raw.encode('utf-8')
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'wb') as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self.path)
        except (OSError, UnicodeEncodeError) as e:
            raise DataStoreError(f"Can't write history slot at {self.path}.") from e
        finally:
            tmp_path.unlink(missing_ok=True)
        logger.debug('Wrote history slot.', extra={'path': str(self.path), 'bytes': len(data)})

    def delete(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise DataStoreError(f"Can't delete history slot at {self.path}.") from e
