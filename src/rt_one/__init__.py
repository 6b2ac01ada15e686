"""
rt_one: a recursive, stochastic ray tracer for scenes of spheres.

Subpackages:
    core: vectors, rays, intervals and random sampling
    geometry: the Hittable contract, spheres and the world
    materials: Lambertian, metal and dielectric scattering
    camera: pixel grid and ray generation
    renderer: the color integrator, tone mapping and image output
"""

__version__ = "0.1.0"
