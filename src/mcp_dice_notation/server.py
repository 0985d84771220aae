from __future__ import annotations

import logging
import random
import sys

from mcp.server.fastmcp import FastMCP

from .config import settings
from .dice import roll_from_text
from .errors import DiceError


logger = logging.getLogger(__name__)

mcp = FastMCP(settings.server_name)

# None means each call draws from secrets.SystemRandom.
_seeded_rng = random.Random(settings.rng_seed) if settings.rng_seed is not None else None


@mcp.tool()
def roll_dice(notation: str):
    """Roll dice from compact notation such as '2d6+1d4-3'.

    Input: notation (string, no whitespace)
    Output: structured JSON with per-term rolls, total and display lines

    Raises a hard error (exception) on invalid input.
    """

    try:
        return roll_from_text(notation, rng=_seeded_rng)
    except DiceError as e:
        logger.warning("roll_dice failed for %r: %s", notation, e)
        # Fail-fast: surface stable error codes in the message.
        raise ValueError(str(e)) from None


def run() -> None:
    # stdout carries the stdio transport, so logs go to stderr.
    logging.basicConfig(
        level=settings.log_level.upper(),
        stream=sys.stderr,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Starting %s over %s", settings.server_name, settings.transport)
    if settings.rng_seed is not None:
        logger.info("Rolling with fixed seed %d", settings.rng_seed)
    mcp.run(transport=settings.transport)


if __name__ == "__main__":
    run()
