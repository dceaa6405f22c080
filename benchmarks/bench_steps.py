"""
Microbenchmark: time per frame vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from gravity_sandbox.simulation import Simulation
from gravity_sandbox.types import Body
from gravity_sandbox.profiler import Profiler

def run(n: int, steps: int = 300):
    prof = Profiler()
    sim = Simulation(profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # scatter small bodies on a wide grid so few of them merge
    side = int(np.ceil(np.sqrt(n)))
    k = 0
    for iy in range(side):
        for ix in range(side):
            if k >= n:
                break
            x = 200.0 * ix + 5.0 * float(rng.normal())
            y = 200.0 * iy + 5.0 * float(rng.normal())
            sim.add_body(Body(position=(x, y), mass=0.01, radius=2.0))
            k += 1

    # warmup
    for _ in range(30):
        sim.step(1 / 240)

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step(1 / 240)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, len(sim), prof.stats.summary()

if __name__ == "__main__":
    for n in [3, 10, 50, 100, 250]:
        per_step, remaining, summary = run(n)
        print(f"N={n:4d}  left={remaining:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["gravity", "collisions", "compaction", "integrate"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
