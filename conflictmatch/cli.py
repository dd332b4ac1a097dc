# -*- coding: utf-8 -*-
"""Command line interface for the "Cats vs Dogs" vote problem.

The input starts with the number of test cases. Each test case starts with a line of three integers: the number
of cats, the number of dogs and the number of votes. The first two are not needed and only checked to be integers.
Then follows one line per vote with the pet to keep and the pet to discard, e.g. ``C1 D2``.

For each test case, the maximum number of votes that can be satisfied at the same time is written on its own line.

Example Usage:
    catvsdog input.txt
    catvsdog -v --left-prefix D < input.txt
"""
import argparse
import logging
import sys
from typing import Iterator, List, Optional, Sequence, TextIO, Tuple

from .exceptions import ParseError
from .votes import Vote, keeps_prefix, max_satisfied

__all__ = ['read_cases', 'read_cases_file', 'write_results', 'solve', 'main']

logger = logging.getLogger(__name__)

Line = Tuple[int, List[str]]


def _content_lines(f: TextIO) -> Iterator[Line]:
    for line_number, line in enumerate(f, start=1):
        words = line.split()
        if words:
            yield line_number, words


def _next_line(lines: Iterator[Line], expected: str) -> Line:
    try:
        return next(lines)
    except StopIteration:
        raise ParseError('Unexpected end of input, expecting {}'.format(expected)) from None


def _parse_count(word: str, line_number: int, what: str) -> int:
    try:
        value = int(word)
    except ValueError:
        raise ParseError('Expecting {} but got {!r}'.format(what, word), line_number) from None
    if value < 0:
        raise ParseError('The {} must not be negative'.format(what), line_number)
    return value


def read_cases(f: TextIO) -> Iterator[List[Vote]]:
    """Reads the test cases from a stream and yields the list of votes for each of them.

    Blank lines are skipped.

    Raises:
        ParseError: If the input does not follow the format.
    """
    lines = _content_lines(f)
    line_number, words = _next_line(lines, 'the number of test cases')
    if len(words) != 1:
        raise ParseError('Expecting the number of test cases but got {!r}'.format(' '.join(words)), line_number)
    case_count = _parse_count(words[0], line_number, 'number of test cases')

    for case in range(case_count):
        line_number, words = _next_line(lines, 'the header of test case {:d}'.format(case + 1))
        if len(words) != 3:
            raise ParseError('Expecting three counts but got {!r}'.format(' '.join(words)), line_number)
        _parse_count(words[0], line_number, 'number of cats')
        _parse_count(words[1], line_number, 'number of dogs')
        vote_count = _parse_count(words[2], line_number, 'number of votes')

        votes = []  # type: List[Vote]
        for _ in range(vote_count):
            line_number, words = _next_line(lines, 'a vote')
            if len(words) != 2:
                raise ParseError('Expecting a vote but got {!r}'.format(' '.join(words)), line_number)
            votes.append(Vote(*words))
        logger.debug("Read test case %d with %d votes", case + 1, len(votes))
        yield votes


def read_cases_file(filename: Optional[str]) -> List[List[Vote]]:
    """Reads all test cases from a file, or from stdin if no filename is given."""
    if filename:
        with open(filename, 'r', encoding='ascii') as f:
            try:
                return list(read_cases(f))
            except ParseError as exc:
                raise ParseError('{} in {!r}'.format(exc, filename)) from None
    try:
        return list(read_cases(sys.stdin))
    except ParseError as exc:
        raise ParseError('{} in (stdin)'.format(exc)) from None


def write_results(f: TextIO, results: Sequence[int]) -> None:
    for result in results:
        print(result, file=f)


def solve(cases: Sequence[List[Vote]], left_prefix: str='C') -> List[int]:
    """Returns the maximum number of satisfiable votes for each test case."""
    is_left = keeps_prefix(left_prefix)
    results = []
    for case, votes in enumerate(cases, start=1):
        result = max_satisfied(votes, is_left=is_left)
        logger.info("Test case %d: %d of %d votes can be satisfied", case, result, len(votes))
        results.append(result)
    return results


def main(argv: Optional[Sequence[str]]=None) -> int:
    """Main program."""

    parser = argparse.ArgumentParser(prog='catvsdog')
    parser.description = 'Calculate the maximum number of simultaneously satisfiable votes.'

    parser.add_argument('--left-prefix',
                        action='store',
                        default='C',
                        help='votes keeping a pet with this prefix form the left side (default: %(default)s)')
    parser.add_argument('-v', '--verbose',
                        action='count',
                        default=0,
                        help='log progress; repeat for debug output')
    parser.add_argument('input',
                        nargs='*',
                        help='input file(s); leave empty to read from stdin')

    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(levelname)s:%(name)s:%(message)s')

    try:
        for filename in args.input or [None]:
            cases = read_cases_file(filename)
            write_results(sys.stdout, solve(cases, args.left_prefix))
    except (OSError, ValueError) as exc:
        print('ERROR:', exc, file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
