# geometry/world.py
import copy
from typing import Iterable, List, Optional, Tuple, Union

from rt_one.core.interval import Interval
from rt_one.core.ray import Ray
from rt_one.core.vector import Vector3
from rt_one.geometry.hittable import Hittable, HitRecord
from rt_one.geometry.sphere import Sphere
from rt_one.materials.material import Material


class HittableList(Hittable):
    """
    An ordered list of Hittable objects. hit() returns the closest hit.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, t_range: Interval) -> Optional[HitRecord]:
        # Each hit narrows the range, so later objects only count if nearer.
        hit_record = None
        for obj in self.objects:
            rec = obj.hit(ray, t_range)
            if rec is not None:
                t_range = t_range.with_max(rec.distance)
                hit_record = rec
        return hit_record


class World(HittableList):
    """
    The scene: primitives plus the arena of materials they refer to.

    Primitives store an integer material handle; material() resolves it.
    Materials are immutable and may be shared by any number of primitives.
    """
    def __init__(self):
        super().__init__()
        self.materials: List[Material] = []

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Hittable, Material]]) -> "World":
        """
        Builds a world from (primitive, material) pairs. Each primitive is
        copied with its material handle pointing at its paired material, so
        the caller's objects are left untouched.
        """
        world = cls()
        handles = {}
        for primitive, material in pairs:
            key = id(material)
            if key not in handles:
                handles[key] = world.add_material(material)
            primitive = copy.copy(primitive)
            primitive.material = handles[key]
            world.add(primitive)
        return world

    def add_material(self, material: Material) -> int:
        if not isinstance(material, Material):
            raise TypeError(f"Expected a Material, got {type(material).__name__}")
        self.materials.append(material)
        return len(self.materials) - 1

    def material(self, handle: int) -> Material:
        return self.materials[handle]

    def add(self, obj: Hittable):
        handle = getattr(obj, "material", None)
        if handle is not None and not 0 <= handle < len(self.materials):
            raise ValueError(f"Unknown material handle {handle} "
                             f"({len(self.materials)} materials registered)")
        super().add(obj)

    def add_sphere(self, center: Vector3, radius: float,
                   material: Union[int, Material]) -> Sphere:
        """
        Adds a sphere, registering material first if it is not a handle yet.
        """
        if isinstance(material, Material):
            material = self.add_material(material)
        sphere = Sphere(center, radius, material)
        self.add(sphere)
        return sphere

    def clear(self):
        super().clear()
        self.materials.clear()

    def describe(self) -> List[dict]:
        """
        One summary dict per primitive, used for logging scene contents.
        """
        summary = []
        for obj in self.objects:
            entry = {"type": type(obj).__name__}
            if isinstance(obj, Sphere):
                entry.update(center=obj.center.to_tuple(), radius=obj.radius)
            handle = getattr(obj, "material", None)
            if handle is not None:
                entry["material"] = self.material(handle).describe()
            summary.append(entry)
        return summary
