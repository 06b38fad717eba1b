#!/usr/bin/env python3
"""
NRX command line tools - encode text files as NRX sentences and back.
"""

import logging
import sys

import click

from . import DEFAULT_TALKER, FIRST_BUDGET, CONTINUATION_BUDGET
from .decoder import decode_lines
from .encoder import NRXEncoder, parse_budgets
from .errors import NRXError
from .nrx_sentence import NRXSentence


def _setup_logging(verbose: bool):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING, format='%(levelname)s - %(message)s')


@click.command()
@click.argument("text", type=click.File("rb"))
@click.option(
    "-m", "--message-code",
    type=str,
    required=True,
    help="NAVTEX message code (e.g. 'UA98')",
)
@click.option(
    "-t", "--talker",
    type=str,
    default=DEFAULT_TALKER,
    help=f"Talker id (default: {DEFAULT_TALKER})",
)
@click.option(
    "-q", "--sequential-id",
    type=int,
    default=0,
    help="Sequential message id 0-99 (default: 0)",
)
@click.option(
    "-f", "--frequency",
    type=int,
    default=NRXSentence.FREQUENCY_490_KHZ,
    help="Frequency table index 0-9 (default: 1 = 490 kHz)",
)
@click.option(
    "-b", "--budgets",
    type=str,
    default=f"{FIRST_BUDGET}:{CONTINUATION_BUDGET}",
    help=f"Message body budgets FIRST:CONTINUATION (default: {FIRST_BUDGET}:{CONTINUATION_BUDGET})",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
def encode_main(text, message_code: str, talker: str, sequential_id: int, frequency: int, budgets: str, verbose: bool):
    """
    Encode a text file as a series of NRX sentences.

    Examples:

        nrx-encode warning.txt -m UA98

        nrx-encode - -m GA12 -b 40:70 < warning.txt
    """
    _setup_logging(verbose)

    try:
        first_budget, continuation_budget = parse_budgets(budgets)
        encoder = NRXEncoder(talker, first_budget, continuation_budget)
        sentences = encoder.encode(
            text.read().decode("utf-8"),
            message_code,
            sequential_id=sequential_id,
            frequency_table_index=frequency,
        )
    except (NRXError, UnicodeDecodeError) as e:
        click.echo(f"Error encoding message: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Encoded as {len(sentences)} sentences", err=True)

    for sentence in sentences:
        click.echo(sentence)


@click.command()
@click.argument("sentences", type=click.File("rb"))
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
def decode_main(sentences, verbose: bool):
    """
    Reassemble the message carried by a series of NRX sentences.

    Examples:

        nrx-decode series.nmea

        nrx-encode warning.txt -m UA98 | nrx-decode -
    """
    _setup_logging(verbose)

    try:
        message = decode_lines(line.decode("ascii", errors="replace") for line in sentences)
    except NRXError as e:
        click.echo(f"Error decoding sentences: {e}", err=True)
        sys.exit(1)

    click.echo(message.encode("utf-8"), nl=False)
