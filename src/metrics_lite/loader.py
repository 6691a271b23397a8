"""Load metric records written by an external parser as JSON."""

import json
from pathlib import Path
from typing import List, Union

from .exceptions import InputError
from .logging_config import get_logger
from .models import FileMetric

logger = get_logger(__name__)


def load_records(path: Union[str, Path]) -> List[FileMetric]:
    """Read a JSON array of file records.

    Args:
        path: JSON file holding one object per analyzed file

    Returns:
        FileMetric records in file order

    Raises:
        InputError: If the file cannot be read or decoded as UTF-8 JSON,
            is not a list, or a record is missing a key or has the wrong shape
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise InputError(f"{path} is not valid JSON: {e}")
    except UnicodeDecodeError as e:
        raise InputError(f"{path} is not UTF-8 text: {e}")
    except OSError as e:
        raise InputError(f"cannot read {path}: {e}")

    return parse_records(raw)


def parse_records(raw: object) -> List[FileMetric]:
    """Build FileMetric records from already-decoded JSON data."""
    if not isinstance(raw, list):
        raise InputError("expected a JSON array of file records", received=raw)

    records: List[FileMetric] = []
    for index, item in enumerate(raw):
        try:
            records.append(FileMetric.from_dict(item))
        except KeyError as e:
            raise InputError(f"missing key {e}", index=index)
        except (TypeError, AttributeError) as e:
            raise InputError(str(e), received=item, index=index)

    logger.debug(f"Loaded {len(records)} file records")
    return records
