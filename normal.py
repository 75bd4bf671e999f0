'''
Functions related to the standard normal distribution.
Everything here is a pure function. erfc, erf, pdf, cdf and cdfc work on floats
or on numpy arrays (elementwise), the rest only on floats.
'''
from numbers import Real
import math
import numpy as np
from dice_errors import InvalidArgument

# Approximation of erfc from https://dx.doi.org/10.2139/ssrn.4487559
# Relative error is around 1e-16.
ERFC_COEFFICIENTS = (
    (2.71078540045147805, 5.80755613130301624, 3.47954057099518960, 12.06166887286239555),
    (3.47469513777439592, 12.07402036406381411, 3.72068443960225092, 8.44319781003968454),
    (4.00561509202259545, 9.30596659485887898, 3.90225704029924078, 6.36161630953880464),
    (5.16722705817812584, 9.12661617673673262, 4.03296893109262491, 5.13578530585681539),
    (5.95908795446633271, 9.19435612886969243, 4.11240942957450885, 4.48640329523408675),
)

# Newton iteration policy for probit. Neither value is derived from anything,
# they're just what works in double precision.
TOLERANCE = 2.3e-16
MAX_ITERATIONS = 40
PRINT_ITERATIONS = [False]

def _out(x: np.ndarray) -> float|np.ndarray:
    '''Internal function, turns 0-d arrays back into floats.'''
    if x.ndim == 0:
        return float(x)
    return x

def erfc(x: float|np.ndarray) -> float|np.ndarray:
    '''
    Complementary error function.
    Uses erfc(x) = 2 - erfc(-x) for negative x, and is exactly 0 for x >= 30.
    '''
    x = np.asarray(x, dtype=float)
    ax = np.abs(x)
    # inf/inf shows up for infinite inputs, those get overwritten below anyway
    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        res = np.exp(-ax*ax) * 0.56418958354775629 / (ax + 2.06955023132914151)
        for a in ERFC_COEFFICIENTS:
            res = res * ((ax + a[0])*ax + a[1]) / ((ax + a[2])*ax + a[3])
    res = np.where(ax >= 30, 0.0, res)
    return _out(np.where(x < 0, 2 - res, res))

def erf(x: float|np.ndarray) -> float|np.ndarray:
    return 1 - erfc(x)

def pdf(x: float|np.ndarray) -> float|np.ndarray:
    '''Density of the standard normal distribution.'''
    x = np.asarray(x, dtype=float)
    return _out(np.exp(-x*x / 2) / math.sqrt(2 * math.pi))

def cdf(x: float|np.ndarray) -> float|np.ndarray:
    '''P[X <= x] for a standard normal X.'''
    return erfc(-np.asarray(x, dtype=float) / math.sqrt(2)) / 2

def cdfc(x: float|np.ndarray) -> float|np.ndarray:
    '''
    P[X > x] for a standard normal X.
    More accurate than 1-cdf(x) when x is large.
    '''
    return erfc(np.asarray(x, dtype=float) / math.sqrt(2)) / 2

def probit(y: float, tolerance: float = TOLERANCE, max_iterations: int = MAX_ITERATIONS) -> float:
    '''
    Inverse of cdf, computed with Newton's method starting from 0.
    Stops once |cdf(x) - y| <= tolerance, or after max_iterations steps
    (which shouldn't happen for reasonable y).
    y: A float in [0, 1]
    Returns a float, -inf for 0 and inf for 1.
    '''
    if not isinstance(y, Real) or not 0 <= y <= 1:
        raise InvalidArgument(f'Probit undefined outside of [0,1], got {y}')
    if y == 0:
        return -math.inf
    if y == 1:
        return math.inf
    x = 0.0
    fx = cdf(x) - y
    count = 0
    while abs(fx) > tolerance and count < max_iterations:
        x -= fx / pdf(x)
        fx = cdf(x) - y
        count += 1
    if PRINT_ITERATIONS[0]:
        print(f'probit({y}) took {count} iterations, residual {fx}')
    return x

def test(rng: np.random.Generator|None = None) -> float:
    '''
    Self check of probit against cdf. Draws u uniformly from [0, 1) and
    returns u - cdf(probit(u)), which should be within rounding error of 0.
    '''
    if rng is None:
        rng = np.random.default_rng()
    u = float(rng.random())
    return u - cdf(probit(u))

def scale(x: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    '''Turns a standard normal value x into sigma*x + mu.'''
    _check_sigma(sigma)
    return sigma * x + mu

def unscale(x: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    '''Inverse of scale.'''
    _check_sigma(sigma)
    return (x - mu) / sigma

def interval(left: float = -math.inf, right: float = math.inf,
             mu: float = 0.0, sigma: float = 1.0) -> float:
    '''
    Probability that a normal variable with mean mu and standard deviation sigma
    lands between left and right. Either end can be infinite.
    '''
    if left > right:
        raise InvalidArgument(f'Interval [{left}, {right}] is backwards')
    return cdf(unscale(right, mu, sigma)) - cdf(unscale(left, mu, sigma))

def critical(boost: float) -> float:
    '''
    Boundary of the lower critical strip, ie the x with cdf(x) == boost.
    The upper strip is the mirror image at -x.
    boost: A float in [0, 0.5]
    '''
    if not isinstance(boost, Real) or not 0 <= boost <= 0.5:
        raise InvalidArgument(f'Critical boost must be in [0,0.5], got {boost}')
    return probit(boost)

def _check_sigma(sigma: float):
    '''Internal function, validates a standard deviation.'''
    if not isinstance(sigma, Real) or not sigma > 0:
        raise InvalidArgument(f'StdDev must be positive, got {sigma}')
