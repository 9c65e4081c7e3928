"""
Header-driven column mapping.

Resolves required column names to their positions in a header row.
"""

from collections.abc import Iterable, Sequence

from supplyline.errors import MissingColumnsError
from supplyline.utils.logging import get_logger

log = get_logger(__name__)


def map_columns(
    header: Sequence[str],
    required: Iterable[str],
    *,
    table_name: str | None = None,
) -> dict[str, int]:
    """
    Map each required column name to its zero-based index in the header.

    The first exact match wins when a name appears more than once.

    Args:
        header: Header row of the table.
        required: Column names that must all be present.
        table_name: Optional table name used in the error message.

    Returns:
        Mapping from column name to header index.

    Raises:
        MissingColumnsError: If any required column is absent. The message
            lists every required column, not only the missing ones.
    """
    required = list(dict.fromkeys(required))

    positions: dict[str, int] = {}
    for index, cell in enumerate(header):
        if cell not in positions:
            positions[cell] = index

    missing = [name for name in required if name not in positions]
    if missing:
        log.error("Missing required columns", table=table_name, missing=missing)
        raise MissingColumnsError(required, missing, table_name)

    mapping = {name: positions[name] for name in required}
    log.debug("Mapped columns", table=table_name, mapping=mapping)
    return mapping
