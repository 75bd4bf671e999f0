#!/usr/bin/env python3
'''
Exact dice sums and the normal distribution, from the terminal.
Run main() (or this file) for a REPL, or pass a command as arguments, eg
    python dice.py 3d6
    python dice.py probit 0.975
The "handle" function gives the same results without printing, eg
    rows = handle('3d6')
    p = handle('between -1 1')
'''
import re
import sys
import traceback
import numpy as np
from dice_errors import InvalidArgument, ComputationTooLarge
from pascal import pascal, PRINT_ROWS
import normal
import dice_strings

__all__ = ['main', 'handle', 'engine', 'table']

# One engine per number of faces, so that rows stick around between inputs.
engines: dict[int, pascal] = {}

dice_regexp = re.compile(r'([1-9][0-9]*)d([1-9][0-9]*)(?:\s+(-?[0-9]+))?')

functions = {
    'pdf': normal.pdf,
    'cdf': normal.cdf,
    'cdfc': normal.cdfc,
    'erf': normal.erf,
    'erfc': normal.erfc,
    'probit': normal.probit,
    'critical': normal.critical,
}

def engine(faces: int) -> pascal:
    '''Returns the shared engine for dice with this many faces.'''
    if faces not in engines:
        engines[faces] = pascal(faces)
    return engines[faces]

def table(n: int, faces: int) -> list[tuple[int, int, float, float]]:
    '''
    Distribution of ndfaces as a list of (total, count, percent, percent at least).
    '''
    e = engine(faces)
    return list(zip(e.totals(n).tolist(), e.row(n).tolist(),
                    e.percentages(n).tolist(), e.at_least(n).tolist()))

def run_test(k: int = 1) -> float:
    '''Runs normal.test() k times, returns the largest absolute error.'''
    if k < 1:
        raise InvalidArgument(f'Need at least one test, got {k}')
    rng = np.random.default_rng()
    return max(abs(normal.test(rng)) for _ in range(k))

def toggle_verbose() -> bool:
    '''Flips the diagnostic flags, returns the new setting.'''
    PRINT_ROWS[0] = not PRINT_ROWS[0]
    normal.PRINT_ITERATIONS[0] = PRINT_ROWS[0]
    return PRINT_ROWS[0]

def handle(text: str):
    '''
    text: A command, such as "3d6", "3d6 10", "cdf 1.5" or "between -1 1 0 2".
    Returns the list from table() for NdM, a single (total, count, percent, percent at least)
    tuple for "NdM total", a float for the normal functions, a bool for verbose,
    or None for empty input.
    Raises InvalidArgument for input it doesn't understand.
    '''
    text = re.sub(r'\s+', ' ', text.lower().strip())
    if not text:
        return None
    m = dice_regexp.fullmatch(text)
    if m:
        n, faces = int(m.group(1)), int(m.group(2))
        rows = table(n, faces)
        if m.group(3) is None:
            return rows
        total = int(m.group(3))
        if not n <= total <= n*faces:
            raise InvalidArgument(f'{n}d{faces} can only total {n} to {n*faces}, got {total}')
        return rows[total-n]
    command, *args = text.split(' ')
    try:
        if command in functions and len(args) == 1:
            return functions[command](float(args[0]))
        if command == 'between' and len(args) in (2, 3, 4):
            return normal.interval(*(float(x) for x in args))
        if command == 'test' and len(args) <= 1:
            return run_test(*(int(x) for x in args))
    except ValueError as e:
        if isinstance(e, InvalidArgument):
            raise
        raise InvalidArgument(f'Could not read the numbers in "{text}"') from e
    if command == 'verbose' and not args:
        return toggle_verbose()
    raise InvalidArgument(f'"{text}" is not a valid input')

def show(text: str, x):
    '''Internal function, prints the result of handle(text).'''
    if x is None:
        print('Nothing to show.')
    elif isinstance(x, bool):
        print('Verbose output', 'on' if x else 'off')
    elif isinstance(x, list):
        width = max(len(str(count)) for _, count, _, _ in x)
        print(f'{"total":>5} {"ways":>{width}} {"prob %":>7} {"at least %":>10}')
        for total, count, percent, at_least in x:
            print(f'{total:>5} {count:>{width}} {percent:>7.2f} {at_least:>10.2f}')
    elif isinstance(x, tuple):
        total, count, percent, at_least = x
        print(f'Total {total}: {count} ways, {percent:.2f}%, at least {total}: {at_least:.2f}%')
    elif text.startswith('between'):
        print(f'Probability: {x*100:.4f}%')
    else:
        print('Result:', x)

def process(text: str):
    '''Internal function, handles one input and reports errors without raising.'''
    try:
        show(text, handle(text))
    except ComputationTooLarge as e:
        print(f'Too large: {e}')
    except InvalidArgument as e:
        print(f'Not a valid input: {e}')
    except Exception:
        print('Error encountered, aborting input.')
        traceback.print_exc()

def main():
    '''
    Starts an interactive session where the user can type in commands such as 3d6
    or probit 0.9. With command line arguments, runs those as a single command instead.
    '''
    if len(sys.argv) > 1:
        process(' '.join(sys.argv[1:]))
        return
    print('Getting started: Try typing 3d6 or cdf 1.96.')
    while True:
        print('\nEnter q to quit. Enter help for options.')
        try:
            text = input('>>').lower().strip()
        except EOFError:
            break
        if text in ('q', 'quit', 'exit'):
            break
        if text in ('?', 'h', 'help'):
            print(dice_strings.help_string)
            continue
        if len(text) > 0 and not text.isspace():
            process(text)


if __name__ == '__main__':
    print('\33]0;Dice Curves\a', end='')
    sys.stdout.flush()
    main()
