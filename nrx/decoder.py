"""
NRX Decoder - Reassembles a message from a series of NRX sentences.
"""

import logging
from typing import Iterable

from . import reserved
from .errors import DataNotAvailable, SeriesIncomplete, SeriesMismatch
from .nrx_sentence import NRXSentence

# Module-level logger
_logger = logging.getLogger(__name__)


def reassemble(bodies: Iterable[str]) -> str:
    """Concatenate message body chunks, already in series order."""
    return "".join(bodies)


def _optional(getter):
    try:
        return getter()
    except DataNotAvailable:
        return None


def reassemble_series(sentences: Iterable[NRXSentence]) -> str:
    """
    Reassemble the escaped message text of one series.

    Sentences may be given in any order. Continuation sentences may leave
    the message code empty; when present it must match the first one.

    Args:
        sentences: Parsed NRX sentences of a single series

    Returns:
        Escaped message text, see decode_series() for the original text

    Raises:
        SeriesMismatch: If the sentences disagree on the series they belong
            to, or a sentence number is out of range or repeated with a
            different body
        SeriesIncomplete: If sentences of the series are missing
    """
    sentences = list(sentences)
    if not sentences:
        raise SeriesIncomplete("no sentences to reassemble")

    first = sentences[0]
    total = first.get_number_of_sentences()
    sequential_id = first.get_sequential_id()
    message_code = None

    bodies = {}
    for nrx in sentences:
        if nrx.get_number_of_sentences() != total:
            raise SeriesMismatch(
                f"number of sentences differs: {nrx.get_number_of_sentences()} != {total}"
            )
        if nrx.get_sequential_id() != sequential_id:
            raise SeriesMismatch(
                f"sequential id differs: {nrx.get_sequential_id()} != {sequential_id}"
            )

        code = _optional(nrx.get_message_code)
        if code is not None:
            if message_code is None:
                message_code = code
            elif code != message_code:
                raise SeriesMismatch(f"message code differs: {code} != {message_code}")

        number = nrx.get_sentence_number()
        if not 1 <= number <= total:
            raise SeriesMismatch(f"sentence number {number} outside series of {total}")

        # An empty body field carries an empty chunk
        body = _optional(nrx.get_message_body) or ""
        if number in bodies and bodies[number] != body:
            raise SeriesMismatch(f"sentence {number} received twice with different bodies")
        bodies[number] = body

    if len(bodies) < total:
        missing = sorted(set(range(1, total + 1)) - set(bodies))
        raise SeriesIncomplete(f"missing sentences {missing} of {total}")

    _logger.debug(f"Assembled series {message_code or '-'}/{sequential_id} ({total} sentences)")
    return reassemble(bodies[number] for number in range(1, total + 1))


def decode_series(sentences: Iterable[NRXSentence]) -> str:
    """Reassemble a series and decode its reserved characters."""
    return reserved.decode(reassemble_series(sentences))


def decode_lines(lines: Iterable[str]) -> str:
    """
    Decode the message held by the NRX sentences in a sequence of lines.

    Args:
        lines: Wire text lines of one series, blank lines are skipped

    Returns:
        Original message text
    """
    sentences = [NRXSentence.parse(line) for line in lines if line.strip()]
    _logger.debug(f"Parsed {len(sentences)} NRX sentences")
    return decode_series(sentences)
