"""Comma-separated text <-> row/column grid.

Best-effort reader for CSV produced by vision models: blank lines are
skipped, unquoted fields are trimmed, and quoted fields may contain commas,
doubled quotes and line breaks.
"""

DELIMITER = ","
QUOTE = '"'
_BLANKS = " \t"

Grid = list[list[str]]


def parse(text: str) -> Grid:
    """Parse delimiter-separated text into rows of fields.

    Rows with no content after trimming are dropped, so the result never
    contains empty rows.
    """
    rows: Grid = []
    for record in _split_records(text):
        if not record.strip():
            continue
        rows.append(_parse_record(record))
    return rows


def serialize(grid: Grid) -> str:
    """Inverse of parse(): one line per row, quoting fields where needed."""
    return "\n".join(_serialize_row(row) for row in grid)


def split_header(grid: Grid) -> tuple[list[str], Grid]:
    """Return (header, body); the first row is always the header."""
    if not grid:
        return [], []
    return grid[0], grid[1:]


def _split_records(text: str) -> list[str]:
    # Only a quote at the start of a field opens a quoted section, so a stray
    # quote mid-field (5" screen) stays literal. A quote still open at the end
    # of the text never closed: its record is split back into lines.
    records: list[str] = []
    current: list[str] = []
    in_quotes = False
    just_closed = False
    at_field_start = True
    quote_start = 0
    for char in text.replace("\r\n", "\n").replace("\r", "\n"):
        if in_quotes:
            if char == QUOTE:
                in_quotes = False
                just_closed = True
            current.append(char)
            continue
        if char == QUOTE and (at_field_start or just_closed):
            in_quotes = True
            quote_start = len(current)
            just_closed = False
            at_field_start = False
            current.append(char)
            continue
        just_closed = False
        if char == "\n":
            records.append("".join(current))
            current = []
            at_field_start = True
            continue
        current.append(char)
        if char == DELIMITER:
            at_field_start = True
        elif char not in _BLANKS:
            at_field_start = False
    if in_quotes:
        head = "".join(current[:quote_start])
        lines = "".join(current[quote_start:]).split("\n")
        records.append(head + lines[0])
        records.extend(lines[1:])
    else:
        records.append("".join(current))
    return records


def _parse_record(record: str) -> list[str]:
    fields: list[str] = []
    length = len(record)
    i = 0
    while True:
        start = i
        while start < length and record[start] in _BLANKS:
            start += 1
        if start < length and record[start] == QUOTE:
            value, i = _read_quoted(record, start + 1)
            end = _next_delimiter(record, i)
            # Text between the closing quote and the delimiter is kept.
            value += record[i:end].strip()
        else:
            end = _next_delimiter(record, i)
            value = record[i:end].strip()
        fields.append(value)
        if end >= length:
            return fields
        i = end + 1


def _next_delimiter(record: str, i: int) -> int:
    end = record.find(DELIMITER, i)
    return len(record) if end == -1 else end


def _read_quoted(record: str, i: int) -> tuple[str, int]:
    chars: list[str] = []
    length = len(record)
    while i < length:
        char = record[i]
        if char == QUOTE:
            if i + 1 < length and record[i + 1] == QUOTE:
                chars.append(QUOTE)
                i += 2
                continue
            return "".join(chars), i + 1
        chars.append(char)
        i += 1
    # Unterminated quote: keep what was read.
    return "".join(chars), i


def _serialize_row(row: list[str]) -> str:
    if len(row) == 1 and row[0] == "":
        return QUOTE * 2
    return DELIMITER.join(_serialize_field(field) for field in row)


def _serialize_field(field: str) -> str:
    needs_quotes = (
        DELIMITER in field
        or QUOTE in field
        or "\n" in field
        or "\r" in field
        or field != field.strip()
    )
    if not needs_quotes:
        return field
    return QUOTE + field.replace(QUOTE, QUOTE * 2) + QUOTE
