'''
Collection of debugging flags to control debugging flow.
'''

# set logging verbosity to DEBUG level
DEBUG_LOGGING = False

# logs which sign region interval mul, flip and pow took.
# only visible with DEBUG_LOGGING enabled
SHOW_INTERVAL_CASES = True

# logs every timing sample of a benchmark case,
# not just the summary
SHOW_BENCH_SAMPLES = False
