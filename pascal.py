'''Exact counts for sums of dice'''
from numbers import Integral
import numpy as np
from dice_errors import InvalidArgument, ComputationTooLarge

# Largest n*die that row() will compute. This isn't a mathematical limit,
# past this point the exact integers just get slow and large.
MAX_WORK = 1000
PRINT_ROWS = [False]

class pascal:
    '''
    Generalised Pascal's triangle. Row n holds the coefficients of
    (1 + x + ... + x^(die-1))^n, so row(n)[i] is the number of ways that n dice
    with faces 1..die add up to i+n.
    Rows are computed on demand and kept for the lifetime of the instance.
    Not safe to share between threads without a lock, since row() fills
    the cache in place.

    Initialization parameters:
    die: A positive integer, the number of faces on each die
    limit (optional): The largest n*die allowed, defaults to MAX_WORK
    '''
    def __init__(self, die: int = 2, limit: int = MAX_WORK):
        self.limit = limit
        self._die = _check_die(die)
        self.triangle: dict[int, np.ndarray] = {}

    def __repr__(self) -> str:
        return f'pascal({self._die}, {self.limit})'

    @property
    def die(self) -> int:
        return self._die

    @die.setter
    def die(self, faces: int):
        faces = _check_die(faces)
        if faces != self._die:
            self._die = faces
            self.triangle = {}

    def row(self, n: int) -> np.ndarray:
        '''
        Returns the exact counts for the sum of n dice, a numpy array of python ints
        with length (die-1)*n+1. The array is the cached one, so don't modify it.
        Raises InvalidArgument if n < 1, ComputationTooLarge if n*die > limit.
        '''
        if not isinstance(n, Integral) or n < 1:
            raise InvalidArgument(f'n must be an integer >= 1, got {n}')
        n = int(n)
        if n in self.triangle:
            return self.triangle[n]
        if n == 1:
            out = np.ones(self._die, dtype=object)
        elif n * self._die > self.limit:
            raise ComputationTooLarge(n, self._die, self.limit)
        else:
            left = self.row(n >> 1)
            right = self.row(n - (n >> 1))
            # Multiplying the generating polynomials, one shifted copy of
            # right per coefficient of left.
            out = np.zeros(len(left) + len(right) - 1, dtype=object)
            for i, c in enumerate(left):
                out[i:i+len(right)] += c * right
        self.triangle[n] = out
        if PRINT_ROWS[0]:
            print(f'row {n} computed for d{self._die}, length {len(out)}')
        return out

    def precompute(self, k: int):
        '''Computes rows 1 through k so later lookups are instant.'''
        for i in range(1, k+1):
            self.row(i)

    def cached(self) -> list[int]:
        return sorted(self.triangle)

    def mass(self, n: int) -> int:
        '''Total number of outcomes of n dice.'''
        return self._die**n

    def totals(self, n: int) -> np.ndarray:
        '''The sums that the entries of row(n) count, ie n through die*n.'''
        return np.arange(n, n + len(self.row(n)))

    def peak(self, n: int) -> int:
        '''The largest count in row n, which is always the middle one.'''
        x = self.row(n)
        return x[len(x) >> 1]

    def percentages(self, n: int) -> np.ndarray:
        '''
        Probability of each total of n dice, in percent.
        Each value is a correctly rounded float, the division happens on the exact counts.
        '''
        mass = self.mass(n)
        return np.array([100 * c / mass for c in self.row(n)])

    def at_least(self, n: int) -> np.ndarray:
        '''
        Probability, in percent, of n dice adding up to at least each total.
        The first entry is always 100.
        '''
        x = self.row(n)
        mass = self.mass(n)
        below = np.cumsum(x) - x
        return np.array([100 * (mass - c) / mass for c in below])

def _check_die(faces) -> int:
    '''Internal function, validates a number of faces.'''
    if not isinstance(faces, Integral) or faces < 1:
        raise InvalidArgument(f'A die needs a positive integer number of faces, got {faces}')
    return int(faces)
