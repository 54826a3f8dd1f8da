"""SAUCE record parsing."""

import logging
from datetime import datetime

from ansi_raster.sauce.record import DataType, FileType, SauceRecord

logger = logging.getLogger(__name__)

SAUCE_ID = b"SAUCE"
COMNT_ID = b"COMNT"
SAUCE_RECORD_SIZE = 128
COMMENT_LINE_SIZE = 64


def _text(field: bytes) -> str:
    return field.rstrip(b'\x00 ').decode('cp437', errors='replace')


def parse_sauce_bytes(data: bytes) -> SauceRecord | None:
    """
    Parse the SAUCE record at the end of a file's contents.
    
    Returns None when the data carries no SAUCE trailer.
    """
    if len(data) < SAUCE_RECORD_SIZE:
        return None
    
    trailer = data[-SAUCE_RECORD_SIZE:]
    if trailer[0:5] != SAUCE_ID:
        return None
    
    # Date is stored as CCYYMMDD
    date = None
    date_str = trailer[82:90].decode('ascii', errors='replace')
    if date_str.isdigit():
        try:
            date = datetime.strptime(date_str, "%Y%m%d")
        except ValueError:
            logger.debug("ignoring invalid SAUCE date %r", date_str)
    
    data_type = DataType(trailer[94]) if trailer[94] < len(DataType) else DataType.NONE
    file_type = trailer[95]
    if data_type == DataType.CHARACTER and file_type < len(FileType):
        file_type = FileType(file_type)
    
    num_comments = trailer[104]
    comments: list[str] = []
    if num_comments:
        block_start = len(data) - SAUCE_RECORD_SIZE - 5 - num_comments * COMMENT_LINE_SIZE
        if block_start >= 0 and data[block_start:block_start + 5] == COMNT_ID:
            offset = block_start + 5
            for _ in range(num_comments):
                comments.append(_text(data[offset:offset + COMMENT_LINE_SIZE]))
                offset += COMMENT_LINE_SIZE
    
    record = SauceRecord(
        title=_text(trailer[7:42]),
        author=_text(trailer[42:62]),
        group=_text(trailer[62:82]),
        date=date,
        file_size=int.from_bytes(trailer[90:94], 'little'),
        data_type=data_type,
        file_type=file_type,
        tinfo=tuple(
            int.from_bytes(trailer[offset:offset + 2], 'little') for offset in (96, 98, 100, 102)
        ),
        flags=trailer[105],
        font_name=trailer[106:128].rstrip(b'\x00').decode('cp437', errors='replace'),
        comments=comments,
    )
    logger.debug("found SAUCE record %r by %r", record.title, record.author)
    return record


def strip_sauce(data: bytes, record: SauceRecord | None) -> bytes:
    """Return the artwork bytes without the SAUCE trailer and comment block."""
    if record is None:
        return data
    end = len(data) - SAUCE_RECORD_SIZE
    if record.comments:
        end -= 5 + len(record.comments) * COMMENT_LINE_SIZE
    return data[:end]
