'''Exceptions raised by the numeric modules'''

class InvalidArgument(ValueError):
    '''A value outside of the domain of the function, eg n < 1 dice or a probability of 1.1'''


class ComputationTooLarge(ValueError):
    '''
    The requested row needs more exact arithmetic than the engine allows.
    n: The number of dice requested
    die: The number of faces per die
    limit: The largest allowed value of n*die
    '''
    def __init__(self, n: int, die: int, limit: int):
        super().__init__(f'{n}d{die} is too large to compute exactly (n*die must be at most {limit})')
        self.n = n
        self.die = die
        self.limit = limit
