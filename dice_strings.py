help_string = '''
Available things:
 NdM:
   Exact distribution of the sum of N dice with M faces each, eg 3d6 or 10d20.
   Prints every possible total, the number of ways to roll it, the probability of rolling
   it and the probability of rolling at least that much (both in percent).
   Counts are exact, so 100d10 works fine, but N*M has to be at most 1000.

 NdM total:
   Just one line of the above, eg "3d6 10".

 pdf, cdf, cdfc, erf, erfc:
   Standard normal functions, eg "cdf 1.96" is the probability that a standard normal
   variable is at most 1.96. cdfc is the probability that it's greater.

 probit:
   Inverse of cdf, eg "probit 0.975" is about 1.96. Only accepts values in [0, 1].

 between:
   Probability of a normal variable landing between two values.
   Syntax: between left right [mean] [stddev]
   Ex: "between -1 1" is about 68.27%, "between 90 110 100 15" uses mean 100, stddev 15.
   Use inf or -inf for an open end.

 critical:
   Where the critical strips start for a given boost, eg "critical 0.05".
   The boost must be between 0 and 0.5.

 test:
   Checks probit against cdf on random values, eg "test" or "test 1000".
   Prints the worst error, which should be tiny.

 verbose:
   Toggles printing of internal details, like when rows get computed and how many
   iterations probit needed.

 q, quit, exit:
   Leave.'''
