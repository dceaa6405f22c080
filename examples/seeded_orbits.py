# examples/seeded_orbits.py
from gravity_sandbox.simulation import Simulation

sim = Simulation.seeded(copies=3)

dt = 1 / 60
t = 0.0
while t < 5.0:
    sim.step(dt)
    t += dt

print("t:", round(t, 3), "bodies:", len(sim))
for b in sim.bodies:
    print(f"[{b.id}] m={b.mass:g} pos=({b.position.x:.1f}, {b.position.y:.1f}) "
          f"v=({b.velocity.x:.1f}, {b.velocity.y:.1f})")
