"""
NRX - NAVTEX received message sentences
Codec for escaping, splitting and reassembling NAVTEX text over NRX sentences.
"""

__version__ = "0.1.0"

# Sentence framing
BEGIN_CHAR = "$"
ALTERNATIVE_BEGIN_CHAR = "!"
CHECKSUM_DELIMITER = "*"
FIELD_DELIMITER = ","

# NRX schema
DEFAULT_TALKER = "CR"
NRX_SENTENCE_ID = "NRX"
NRX_FIELD_COUNT = 13

# Message body budgets per sentence.
# The first sentence carries every header field, continuation sentences
# leave them empty and have room for more text.
FIRST_BUDGET = 28
CONTINUATION_BUDGET = 57

from .errors import (
    NRXError,
    DataNotAvailable,
    ParseError,
    ChecksumMismatch,
    InvalidArgument,
    MalformedEscape,
    SeriesError,
    SeriesIncomplete,
    SeriesMismatch,
)
from .reserved import RESERVED_CHARACTERS, encode, decode
from .values import DataStatus, Date, Time
from .sentence import Sentence, XORChecksum
from .nrx_sentence import NRXSentence
from .encoder import NRXEncoder, split
from .decoder import reassemble, reassemble_series, decode_series, decode_lines

__all__ = [
    "NRXError",
    "DataNotAvailable",
    "ParseError",
    "ChecksumMismatch",
    "InvalidArgument",
    "MalformedEscape",
    "SeriesError",
    "SeriesIncomplete",
    "SeriesMismatch",
    "RESERVED_CHARACTERS",
    "encode",
    "decode",
    "DataStatus",
    "Date",
    "Time",
    "Sentence",
    "XORChecksum",
    "NRXSentence",
    "NRXEncoder",
    "split",
    "reassemble",
    "reassemble_series",
    "decode_series",
    "decode_lines",
]
