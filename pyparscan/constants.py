"""
Global constants and configuration parameters for PyParScan.

This module centralises the runtime parameters shared by every reduction and
scan routine: the default worker budget, the integer width of the element
domain and the sizes used when narrating arrays on the console. Values are
read by the Taichi kernels at compile time, so they must be settled (through
``pyparscan.environment.initialise``) before the first kernel launch.

Constant Categories:
- Utils Constants: initialisation state
- Parallel Constants: worker budget of the Taichi CPU pool
- Element Constants: integer width, Taichi/numpy dtypes, max sentinel
- Console Constants: preview lengths and random input ranges used by the CLI

Usage:
    import pyparscan.constants as cte

    # Default number of workers used by every entry point
    workers = cte.WORKERS

    # Sentinel standing for negative infinity in max reductions
    lowest = cte.max_identity()

"""

import taichi as ti
import numpy as np

#########################################
###### UTILS CONSTANTS ##################
#########################################

INITIALISED = False


#########################################
###### PARALLEL CONSTANTS ###############
#########################################

# Number of workers in the Taichi CPU thread pool
# Also the default partition count of the sectioned reduction and block scan
WORKERS = 4


#########################################
###### ELEMENT CONSTANTS ################
#########################################

# Width of the signed integer element domain (32 or 64)
INT_BITS = 32

# Taichi element type, used by every working buffer
DTYPE = ti.i32

# Matching numpy element type, used for inputs and results
NP_DTYPE = np.int32

# Supported widths
_DTYPES = {
	32: (ti.i32, np.int32),
	64: (ti.i64, np.int64),
}


def set_int_bits(bits: int):
	"""
	Select the width of the integer element domain.

	Args:
		bits: 32 or 64

	Raises:
		ValueError: if the width is not supported

	"""
	global INT_BITS, DTYPE, NP_DTYPE
	if bits not in _DTYPES:
		raise ValueError(f"Unsupported integer width: {bits}. Use one of {sorted(_DTYPES)}.")
	INT_BITS = bits
	DTYPE, NP_DTYPE = _DTYPES[bits]


def max_identity() -> int:
	"""
	Smallest representable element, standing for negative infinity.

	Seeds the per-partition maxima so that an empty partition never wins
	the final fold.
	"""
	return int(np.iinfo(NP_DTYPE).min)


#########################################
###### CONSOLE CONSTANTS ################
#########################################

# Number of elements shown when previewing inputs and scan results
PREVIEW = 20

# Number of buffer cells shown per synchronisation step when tracing
TRACE_PREVIEW = 16

# Inclusive bounds of the random input for the maximum methods
MAX_RAND_LOW = 0
MAX_RAND_HIGH = 999

# Inclusive bounds of the random input for the scan methods
# Kept small so that prefix sums of large arrays stay within 32 bits
SCAN_RAND_LOW = 1
SCAN_RAND_HIGH = 100
