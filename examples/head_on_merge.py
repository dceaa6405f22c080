from gravity_sandbox.simulation import Simulation
from gravity_sandbox.types import Body
from gravity_sandbox.core.invariants import total_mass, linear_momentum

sim = Simulation(gravitational_constant=0.0)
a = Body(position=(-100.0, 0.0), velocity=(+30.0, 0.0), mass=1.0, radius=3.0)
b = Body(position=(+100.0, 0.0), velocity=(-10.0, 0.0), mass=2.0, radius=4.0)
sim.add_body(a); sim.add_body(b)

m0, p0 = total_mass(sim.bodies), linear_momentum(sim.bodies)

for _ in range(600):
    sim.step(1 / 60)

print("bodies:", len(sim))
print("mass", m0, "->", total_mass(sim.bodies))
print("momentum", p0, "->", linear_momentum(sim.bodies))
print("survivor radius:", sim.bodies[0].radius)
