"""
Command-line front end.

    pysms reorder   [-a W] [-b W] [-c W] [-d W] [-e W] [INPUT [OUTPUT]]
    pysms info      [-s] [INPUT [OUTPUT]]
    pysms transpose [-R | -C] [INPUT [OUTPUT]]

INPUT and OUTPUT default to stdin/stdout; ``-`` means the same. File
output goes to a temporary file that replaces OUTPUT only on success.
Exit status is 0 on success and 1 on any error.
"""

from __future__ import annotations

import argparse
import os
import sys
import tempfile
from contextlib import contextmanager
from typing import IO, Iterator

from pysms import __version__
from pysms.codec import SMSReader, SMSWriter, ValueFormat
from pysms.core.exceptions import PySMSError, StreamIOError
from pysms.reorder import ReorderWeights, reorder_stream
from pysms.sparse import summarize_entries, transpose_matrix


PROG = 'pysms'


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


@contextmanager
def open_input(path: str | None) -> Iterator[IO[bytes]]:
    """Binary input stream for ``path``; stdin for None or '-'."""
    if path in (None, '-'):
        yield sys.stdin.buffer
        return
    try:
        stream = open(path, 'rb')
    except OSError as e:
        raise StreamIOError.from_os_error('open input file', e, path) from e
    with stream:
        yield stream


@contextmanager
def open_output(path: str | None, binary: bool = True) -> Iterator[IO]:
    """
    Output stream for ``path``; stdout for None or '-'.

    A file is written under a temporary name in the same directory and
    renamed to ``path`` only if the block completes.
    """
    if path in (None, '-'):
        stream = sys.stdout.buffer if binary else sys.stdout
        yield stream
        stream.flush()
        return

    directory = os.path.dirname(os.path.abspath(path))
    try:
        fd, tmp_path = tempfile.mkstemp(prefix='.pysms-', dir=directory)
    except OSError as e:
        raise StreamIOError.from_os_error('open output file', e, path) from e
    try:
        with os.fdopen(fd, 'wb' if binary else 'w') as stream:
            yield stream
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        raise


def _value_format(args: argparse.Namespace) -> ValueFormat:
    return ValueFormat(notation=args.notation, precision=args.precision)


def _add_streams(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('input', nargs='?', metavar='INPUT',
                        help="Read input matrix from INPUT (default: stdin).")
    parser.add_argument('output', nargs='?', metavar='OUTPUT',
                        help="Write output to OUTPUT (default: stdout).")


def _add_value_format(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('-p', '--precision', type=int, default=None,
                        help="Number of digits for printing matrix entry values.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-E', '--scientific', dest='notation', action='store_const',
                       const='scientific', help="Scientific notation for entry values.")
    group.add_argument('-F', '--fixed', dest='notation', action='store_const',
                       const='fixed', help="Fixed notation for entry values.")
    group.add_argument('-G', '--general', dest='notation', action='store_const',
                       const='general',
                       help="Choose fixed or scientific notation by magnitude (default).")
    parser.set_defaults(notation='general')


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="Tools for sparse matrices in SMS format.",
    )
    parser.add_argument('-V', '--version', action='version',
                        version=f"{PROG} {__version__}")
    commands = parser.add_subparsers(dest='command', metavar='COMMAND')
    commands.required = True

    defaults = ReorderWeights()
    reorder = commands.add_parser(
        'reorder',
        help="Permute rows and columns to speed up rank computation.",
        description=(
            "Permute rows and columns of the input matrix, in order to minimize\n"
            "computation time of the rank by Gaussian Elimination algorithms.\n"
            "Rows are chosen greedily by five weighted criteria:\n"
            "   a. share of total nonzero entries in the row\n"
            "   b. nonzero entries in columns before the diagonal\n"
            "   c. nonzero entries in columns from the diagonal on\n"
            "   d. nonzero entries in columns no previous row touches\n"
            "   e. closeness of the first non-pivot nonzero past the diagonal\n"
            "Rows minimizing the weighted sum move to the top."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    for name in 'abcde':
        reorder.add_argument(
            f'-{name}', f'--weight-{name}', type=float, dest=f'weight_{name}',
            default=getattr(defaults, name), metavar='W',
            help=f"Weight of criterion {name} (default: {getattr(defaults, name)}).",
        )
    _add_value_format(reorder)
    _add_streams(reorder)
    reorder.set_defaults(func=_run_reorder)

    info = commands.add_parser(
        'info', help="Print rows, columns, nonzeros and density.",
    )
    info.add_argument('-s', '--short', action='store_true',
                      help="One-line output format.")
    _add_streams(info)
    info.set_defaults(func=_run_info)

    transpose = commands.add_parser(
        'transpose', help="Output the transpose of the input matrix.",
    )
    shape = transpose.add_mutually_exclusive_group()
    shape.add_argument('-R', '--tall', dest='only_if', action='store_const', const='tall',
                       help="Only transpose if the output has more rows than columns.")
    shape.add_argument('-C', '--wide', dest='only_if', action='store_const', const='wide',
                       help="Only transpose if the output has more columns than rows.")
    _add_value_format(transpose)
    _add_streams(transpose)
    transpose.set_defaults(func=_run_transpose)

    return parser


def _run_reorder(args: argparse.Namespace) -> int:
    # configuration problems surface before any stream is opened
    weights = ReorderWeights(
        args.weight_a, args.weight_b, args.weight_c, args.weight_d, args.weight_e,
    ).normalized()
    value_format = _value_format(args)
    with open_input(args.input) as src, open_output(args.output) as dst:
        reorder_stream(src, dst, weights, value_format=value_format)
    return 0


def _run_info(args: argparse.Namespace) -> int:
    with open_input(args.input) as src:
        info = summarize_entries(SMSReader(src))
    with open_output(args.output, binary=False) as dst:
        dst.write(info.format(short=args.short) + "\n")
    return 0


def _run_transpose(args: argparse.Namespace) -> int:
    value_format = _value_format(args)
    with open_input(args.input) as src, open_output(args.output) as dst:
        transpose_matrix(SMSReader(src), SMSWriter(dst, value_format), only_if=args.only_if)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the CLI; return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except PySMSError as e:
        print(f"{PROG}: ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
