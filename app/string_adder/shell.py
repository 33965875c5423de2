"""
Shell Module

Interactive read-evaluate-print loop around the Adder.

Type an input such as //[*][%]\\n1*2%3 on one line; the two characters
"\\n" stand for a real newline. Type the exit command (default "exit")
to quit, "clear" to empty the cache or "stats" for cache statistics.
"""

import sys
import uuid
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape

from .adder import Adder
from .config import Config, load_config
from .logging_config import get_logger, set_correlation_id, setup_logging

logger = get_logger("shell")

BANNER = "Add a string with the following format: //[delim1][delim2]\\n   ---   //[*][%]\\n1*2%3"
CLEAR_COMMAND = "clear"
STATS_COMMAND = "stats"


def expand_newlines(line: str) -> str:
    """Turn the literal two-character sequence \\n into a newline."""
    return line.replace("\\n", "\n")


def evaluate_line(adder: Adder, line: str, console: Console) -> bool:
    """
    Evaluate one line and print the sum or the error message.

    Returns:
        True if the line summed successfully
    """
    set_correlation_id(uuid.uuid4().hex[:8])
    try:
        result = adder.evaluate(expand_newlines(line))
    finally:
        set_correlation_id(None)

    if result.success:
        console.print(str(result), markup=False, highlight=False)
    else:
        console.print(f"[red]{escape(str(result))}[/red]", highlight=False)
    return result.success


def run_shell(
    adder: Adder,
    config: Config,
    console: Optional[Console] = None,
    read_line: Optional[Callable[[], str]] = None,
) -> None:
    """
    Run the loop until the exit command, end of input or Ctrl+C.

    Args:
        adder: Adder to evaluate lines with
        config: Supplies the exit command
        console: Where output goes (stdout by default)
        read_line: Returns the next input line (input() by default)
    """
    console = console or Console()
    read_line = read_line or input

    console.print(BANNER, markup=False, highlight=False)
    logger.info("Shell started")

    while True:
        try:
            line = read_line()
        except (EOFError, KeyboardInterrupt):
            console.print("[dim]Goodbye[/dim]")
            break

        if line == config.exit_command:
            break
        if line == CLEAR_COMMAND:
            adder.clear_cache()
            console.print("[dim]Cache cleared[/dim]")
            continue
        if line == STATS_COMMAND:
            stats = adder.get_status()["cache"]
            console.print(
                f"[dim]entries={stats['entries']} hits={stats['hits']} "
                f"misses={stats['misses']}[/dim]"
            )
            continue

        evaluate_line(adder, line, console)

    logger.info("Shell stopped")


# === Command Line Interface ===

def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the string-adder command.

    Usage:
        string-adder                    # interactive shell
        string-adder "1,2" "//;\\n3;4"  # evaluate each argument and exit
    """
    args = sys.argv[1:] if argv is None else argv

    config = load_config()
    if not config.ceiling and hasattr(sys, "set_int_max_str_digits"):
        # Without a ceiling a sum can be too long for str(int)
        sys.set_int_max_str_digits(0)
    setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    adder = Adder.from_config(config)
    console = Console()

    if args:
        results = [evaluate_line(adder, arg, console) for arg in args]
        return 0 if all(results) else 1

    run_shell(adder, config, console=console)
    return 0

