"""CSV encoding and download delivery.

Escaping follows what spreadsheet tools expect: a cell containing a double
quote, a comma or a newline is wrapped in double quotes with inner quotes
doubled; everything else is written as is.
"""
import io
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional, Union
from urllib.parse import quote

from starlette.responses import Response

logger = logging.getLogger(__name__)

CsvValue = Union[str, int, float, bool, None]
CsvRow = Mapping[str, CsvValue]

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"
UTF8_BOM = "\ufeff"
_SPECIAL_CHARS = ('"', ",", "\n")


def stringify(value: Any) -> str:
    """Render a scalar cell value; None becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def escape_cell(value: Any) -> str:
    s = stringify(value)
    if any(ch in s for ch in _SPECIAL_CHARS):
        return '"' + s.replace('"', '""') + '"'
    return s


def collect_columns(rows: Iterable[CsvRow]) -> list[str]:
    """Union of row keys in first-seen order."""
    seen: dict[str, None] = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def csv_header(columns: Sequence[str]) -> str:
    """Header line for `columns`, escaped like any other cell."""
    return ",".join(escape_cell(c) for c in columns)


def build_csv(rows: Sequence[CsvRow], columns: Optional[Sequence[str]] = None) -> str:
    """Serialize rows to CSV text.

    Args:
        rows: Flat records; rows may have different key sets
        columns: Explicit column order. Defaults to every key seen, in
            first-seen order.

    Returns:
        Header plus one line per row joined by "\\n", without a trailing
        newline. Empty input gives an empty string (no header).
    """
    if not rows:
        return ""

    cols = list(columns) if columns is not None else collect_columns(rows)
    lines = [csv_header(cols)]
    for row in rows:
        lines.append(",".join(escape_cell(row.get(c)) for c in cols))
    return "\n".join(lines)


def content_disposition(filename: str) -> str:
    """Attachment header value with an ASCII fallback and a UTF-8 filename."""
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "'")
    fallback = fallback.replace("?", "_")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def download_csv(filename: str, csv_text: str) -> Response:
    """Wrap a CSV payload into a file download response.

    A UTF-8 byte-order mark is prepended so spreadsheet tools detect the
    encoding. The encoding buffer is released before the response is returned.
    """
    with io.BytesIO() as buffer:
        buffer.write(UTF8_BOM.encode("utf-8"))
        buffer.write(csv_text.encode("utf-8"))
        payload = buffer.getvalue()

    logger.info(f"[CsvExport] Delivering {filename} ({len(payload)} bytes)")
    return Response(
        content=payload,
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": content_disposition(filename)},
    )
