import numpy as np
from utils import normalize

class Hit:
    def __init__(self, t, point=None, normal=None, material=None):
        """Create a Hit with the given data.

        Parameters:
          t : float -- the distance of the intersection along the ray (inf for a miss)
          point : (3,) -- the 3D point where the intersection happens
          normal : (3,) -- the 3D outward-facing unit normal to the surface at the hit point
          material : (Material) -- the material of the surface
        """
        self.t = t
        self.point = point
        self.normal = normal
        self.material = material

# Value to represent absence of an intersection
no_hit = Hit(np.inf)


class Sphere:

    def __init__(self, center, radius, material=None):
        """Create a sphere with the given center and radius.

        Parameters:
          center : (3,) -- a 3D point specifying the sphere's center
          radius : float -- a Python float specifying the sphere's radius (> 0)
          material : Material -- the material of the surface
        """
        self.center = center
        self.radius = radius
        self.material = material

    def intersect(self, ray):
        """Computes the nearest intersection with a nonnegative distance between a ray and this sphere.

        Uses the geometric test: the ray direction must be unit length.
        If the sphere's center lies behind the ray origin the ray is
        reported as a miss, even when the origin is inside the sphere.

        Parameters:
          ray : Ray -- the ray to intersect with the sphere
        Return:
          Hit -- the hit data, or no_hit
        """
        hypotenuse = self.center - ray.origin
        projection = np.dot(hypotenuse, ray.direction)
        if projection < 0:
            return no_hit

        # distance from the center to the ray line
        d_sq = max(0.0, np.dot(hypotenuse, hypotenuse) - projection * projection)
        d = np.sqrt(d_sq)
        if d > self.radius:
            return no_hit

        # half chord length
        m = np.sqrt(self.radius * self.radius - d_sq)
        t0 = projection - m
        t1 = projection + m

        t = t0
        if t < 0.:
            t = t1

        point = ray.origin + t * ray.direction
        normal = normalize(point - self.center)
        return Hit(t, point, normal, self.material)
