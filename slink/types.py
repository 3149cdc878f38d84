from datetime import datetime
from typing import Any, TypeAlias
from collections.abc import Callable


# Type aliases for Python dictionaries
RecordDict: TypeAlias = dict[str, Any]
AppConfig: TypeAlias = dict[str, Any]

# Type aliases for injectable dependencies
IdSource: TypeAlias = Callable[[], int]
Clock: TypeAlias = Callable[[], datetime]
