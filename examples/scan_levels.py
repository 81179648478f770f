import pyparscan as pps
import matplotlib.pyplot as plt
import numpy as np

pps.environment.initialise(workers=4)

# 40 cells, padded to 64 inside the scan
values = np.random.default_rng(42).integers(1, 10, size=40).astype(np.int32)

steps = []
result = pps.scan.inclusive_scan(values, observer=steps.append, validate=True)
print(f"{len(steps)} synchronisation steps, total = {result[-1]}")

# One row per barrier: up-sweep levels, root reset, down-sweep levels
rows = np.stack([s.buffer for s in steps])
labels = [f"{s.phase} {s.level}" if s.phase != "reset" else "reset" for s in steps]

fig, ax = plt.subplots(figsize=(12, 5))
im = ax.imshow(rows, cmap="viridis", aspect="auto")
ax.set_yticks(range(len(labels)))
ax.set_yticklabels(labels)
ax.set_xlabel("buffer cell")
ax.axvline(len(values) - 0.5, color="w", ls="--", lw=1)
fig.colorbar(im, ax=ax, label="value")
plt.tight_layout()
plt.show()
