"""
Environment initialisation and management for PyParScan.

Handles the Taichi runtime set-up on the CPU backend: size of the worker pool,
width of the integer element domain and the global initialisation flag.

"""

import os
import warnings

import taichi as ti
from . import constants as cte


def initialise(workers: int = cte.WORKERS, int_bits: int = cte.INT_BITS, debug: bool = False):
	"""
	Initialise the Taichi CPU runtime used by every parallel routine.

	The worker count becomes the size of the Taichi thread pool and the
	default budget of every entry point. Must be called before any kernel
	launch, or left to ``ensure_initialised`` to do with defaults.

	Args:
		workers: Number of CPU worker threads (>= 1)
		int_bits: Width of the signed integer elements (32 or 64)
		debug: Enable Taichi's bound-checking debug mode

	Raises:
		RuntimeError: If already initialised
		ValueError: If workers < 1 or the integer width is unsupported

	"""
	if(cte.INITIALISED):
		raise RuntimeError("PyParScan Taichi runtime already initialised")

	if workers < 1:
		raise ValueError(f"Worker count must be at least 1, got {workers}")

	ncpu = os.cpu_count() or 1
	if workers > ncpu:
		warnings.warn(
			f"Requested {workers} workers but only {ncpu} CPUs are available; "
			"workers will be time-sliced.",
			stacklevel=2,
		)

	cte.set_int_bits(int_bits)
	cte.WORKERS = workers

	ti.init(arch=ti.cpu, cpu_max_num_threads=workers, default_ip=cte.DTYPE, debug=debug)

	# Mark as initialised
	cte.INITIALISED = True


def ensure_initialised():
	"""Initialise with the current defaults unless already done."""
	if not cte.INITIALISED:
		initialise(cte.WORKERS, cte.INT_BITS)


def reboot():
	"""
	Reset the Taichi runtime.

	Frees every buffer and compiled kernel. Use before calling ``initialise``
	again with a different worker count or integer width.
	"""
	ti.reset()
	cte.INITIALISED = False
