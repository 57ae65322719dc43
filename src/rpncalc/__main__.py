## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# rpncalc — A small reverse-Polish-notation calculator for the command line.
#

import sys
import time
from dataclasses import dataclass

import click

from .types import Token
from .errors import RpnError, InsufficientOperands, UnbalancedExpression, NoInputError
from .tokenizer import tokenize_words, split_words, find_invalid, SYMBOLS
from .interpreter import interpret
from .formatting import format_value, format_stack, format_token_pointer


@dataclass(frozen=True)
class RuntimeConfig:
    verbose: int
    stats: bool
    plain: bool
    quiet: bool


class RpnRunner:
    def __init__(self, config: RuntimeConfig):
        self.verbose = config.verbose
        self.stats_enabled = config.stats
        self.plain = config.plain
        self.quiet = config.quiet

        self.total_stats = {'steps': 0, 'start': time.time()} if self.stats_enabled else None
        self.failure = False

    def _echo(self, text: str, err: bool = False) -> None:
        click.echo(text, err=err, color=False if self.plain else None)

    def _fatal_error(self, message: str, detail: str, context: str = '') -> None:
        self._echo(f'\033[30;43m {message} \033[0m {detail}' + (f'\n{context}' if context else ''), err=True)
        self.failure = True

    def _handle_exception(self, exc: RpnError, words: list[str]) -> None:
        if isinstance(exc, InsufficientOperands):
            detail = f"Not enough values on stack to apply operator `\033[1;97m{exc.rpn_token!r}\033[0m`."
            context = format_token_pointer(words, [exc.rpn_index])
            self._fatal_error("STACK ERROR.", detail, context)
        elif isinstance(exc, UnbalancedExpression):
            if exc.depth == 0:
                detail = "Stack is empty after applying all operators; nothing to print."
            else:
                detail = f"Stack contains {exc.depth} values after applying all operators.\nAre you missing an operator at the end?"
            context = f"\033[1;33m  Stack content is\033[0;33m\n    {format_stack(exc.rpn_stack, width=None)}\033[0m"
            self._fatal_error("UNBALANCED EXPRESSION.", detail, context)
        elif isinstance(exc, NoInputError):
            self._fatal_error("NO INPUT.", str(exc))
        else:
            raise exc

    def warn_invalid(self, words: list[str], tokens: list[Token]) -> None:
        if self.quiet or not (invalid := find_invalid(tokens)):
            return
        detail = f"{len(invalid)} invalid token(s) will be ignored."
        self._echo(f'\033[30;43m WARNING. \033[0m {detail}\n' + format_token_pointer(words, invalid, color='\033[33m'), err=True)

    def evaluate(self, words: list[str]) -> None:
        tokens = tokenize_words(words)
        self.warn_invalid(words, tokens)
        try:
            result = interpret(tokens, verbosity=self.verbose, stats=self.total_stats, color=False if self.plain else None)
        except RpnError as exc:
            self._handle_exception(exc, words)
        else:
            self._echo(format_value(result))

    def finalize(self) -> int:
        if self.total_stats:
            elapsed_time = time.time() - self.total_stats['start']
            self._echo(f"\n\033[97m\033[48;5;30m STATISTICS. \033[0m", err=True)
            self._echo(f"step\t\033[97m{self.total_stats['steps']:,}\033[0m", err=True)
            self._echo(f"time\t\033[97m{elapsed_time:.3f}s\033[0m", err=True)
        return 1 if self.failure else 0


def _stdin_is_interactive() -> bool:
    return sys.stdin is None or sys.stdin.isatty()


def _read_words(tokens: tuple[str, ...]) -> list[str]:
    if tokens:
        return list(tokens)
    if _stdin_is_interactive():
        raise NoInputError("Supply an expression as arguments, or pipe one line into standard input.")
    line = sys.stdin.readline()
    if not line.strip():
        raise NoInputError("Standard input did not contain an expression.")
    return split_words(line)


_EPILOG = "Symbols: " + ' '.join(SYMBOLS) + "  (`.` multiplies; `a b log` is the log of a in base b.)"


@click.command(epilog=_EPILOG, context_settings={'ignore_unknown_options': True, 'help_option_names': ['-h', '--help']})
@click.option('--verbose', '-v', default=0, count=True, help='Trace operators (-v) or every token (-vv) while evaluating.')
@click.option('--stats', is_flag=True, help='Display execution statistics (e.g., number of steps).')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes from all output.')
@click.option('--quiet', '-q', is_flag=True, help='Do not warn about invalid tokens that are ignored.')
@click.argument('tokens', nargs=-1)
@click.pass_context
def cli(ctx: click.Context, verbose: int, stats: bool, plain: bool, quiet: bool, tokens: tuple[str, ...]) -> None:
    """Evaluate a reverse-Polish-notation expression, e.g. `rpncalc 3 5 + 2 .`

    Without arguments, one line is read from standard input.
    """
    runner = RpnRunner(RuntimeConfig(verbose=verbose, stats=stats, plain=plain, quiet=quiet))
    try:
        words = _read_words(tokens)
    except NoInputError as exc:
        if not tokens and _stdin_is_interactive():
            click.echo(ctx.get_help(), err=True, color=False if plain else None)
        runner._handle_exception(exc, [])
    else:
        runner.evaluate(words)
    ctx.exit(runner.finalize())


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='rpncalc')


if __name__ == "__main__":
    main()
