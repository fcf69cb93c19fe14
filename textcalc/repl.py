"""
Interactive read-loop around the evaluation pipeline.
"""

import logging
from typing import Callable, Optional

from .config import CalcConfig
from .pipeline import format_result, try_evaluate_line

logger = logging.getLogger(__name__)


def run_repl(
    config: Optional[CalcConfig] = None,
    input_fn: Optional[Callable[[str], str]] = None,
    output_fn: Callable[[str], None] = print,
) -> int:
    """
    Read lines until an empty line or end of input, printing each result.

    Args:
        config: Pipeline configuration; also supplies the prompt.
        input_fn: Called with the prompt, returns one line. Defaults to ``input``.
        output_fn: Called with each line of output (``print`` by default).

    Returns:
        Number of expressions handled.
    """
    config = config or CalcConfig()
    input_fn = input_fn or input
    handled = 0
    logger.debug("Starting read-loop")

    while True:
        try:
            line = input_fn(config.prompt)
        except EOFError:
            break
        if not line:
            break

        result = try_evaluate_line(line, config)
        if result.ok:
            output_fn(f"= {format_result(result.value)}")
        else:
            output_fn("Invalid Expression")
        output_fn("")
        handled += 1

    output_fn("Terminating...")
    logger.debug(f"Read-loop finished after {handled} expressions")
    return handled
