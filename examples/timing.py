import pyparscan as pps
import numpy as np
import time
import taichi as ti

pps.environment.initialise(workers=4)

N = 1 << 20
values = np.random.default_rng(0).integers(0, 100, size=N).astype(np.int32)

# First calls compile the kernels
pps.reduction.tree_max(values[:16])
pps.scan.inclusive_scan(values[:16])
pps.scan.block_scan(values[:16])

for name, fn in [
	("tree max", lambda: pps.reduction.tree_max(values)),
	("sections max", lambda: pps.reduction.sections_max(values)),
	("atomic max", lambda: pps.reduction.atomic_max(values)),
	("blelloch scan", lambda: pps.scan.inclusive_scan(values)),
	("block scan", lambda: pps.scan.block_scan(values)),
]:
	st = time.time()
	for i in range(10):
		fn()
	ti.sync()
	print(f"10 x {name} on {N} elements done in {time.time() - st} s")
