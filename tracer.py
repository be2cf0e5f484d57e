import numpy as np
from materials import Material
from geometry import Sphere, no_hit, Hit
from ImLite import Image
from utils import *

"""
Core implementation of the ray tracer.
"""


class Ray:

    def __init__(self, origin, direction):
        """Create a ray with the given origin and direction.

        The direction is expected to be unit length.
        """
        self.origin = np.array(origin, np.float64)
        self.direction = np.array(direction, np.float64)


def focal_distance_from_fov(width, fov_deg):
    """Distance from the eye to an image plane of the given width for a horizontal field of view in degrees."""
    fov_rad = np.radians(fov_deg)
    return (width / 2.0) / np.tan(fov_rad / 2.0)


class Camera:

    def __init__(self, center=vec([0,0,0]), forward=vec([0,1,0]), up=vec([0,0,1]),
                 width=10.0, height=10.0 * 1080 / 1920, focal_distance=focal_distance_from_fov(10.0, 80.0)):
        """Create a camera with given viewing parameters.

        The camera is a physical object in its own right: an image plane of
        size width x height centered on center, looking along forward. Rays
        leave the plane diverging from the vantage point, which sits
        focal_distance behind it.

        forward and up must be unit vectors and not parallel; this is not
        checked.
        """
        self.center = np.array(center, np.float64)
        self.forward = np.array(forward, np.float64)
        self.up = np.array(up, np.float64)
        self.width = width
        self.height = height
        self.focal_distance = focal_distance

        self.right = np.cross(self.forward, self.up)
        self.vantage_point = self.center - self.forward * self.focal_distance

    def generate_ray(self, img_point):
        """Compute the ray corresponding to a point in the image plane.

        img_point is (x, y) relative to the plane: (0, 0) is its center,
        (-0.5, -0.5) and (0.5, 0.5) opposite corners. The camera never learns
        the dimensions of the output image.
        """
        x_offset = self.right * (img_point[0] * self.width)
        y_offset = self.up * (img_point[1] * self.height)
        source = self.center + x_offset + y_offset

        return Ray(source, normalize(source - self.vantage_point))


class DirectionalLight:

    def __init__(self, direction, color=vec([1,1,1]), intensity=1.0):
        """Create a light infinitely far away.

        direction points from the light toward the scene.
        """
        self.direction = normalize(np.array(direction, np.float64))
        self.color = np.array(color, np.float64)
        self.intensity = intensity

    def illuminate(self, ray, hit, scene):
        """Compute the diffuse and specular shading at a surface point due to this light."""
        mat = hit.material
        normal_hit = hit.normal

        # cosine law
        diffuse_light_color = (self.color * self.intensity) * mat.color
        diffuse_intensity = max(0.0, -np.dot(normal_hit, self.direction))
        diffuse = diffuse_light_color * (diffuse_intensity * mat.k_d)

        # how much the reflected light goes back toward the camera
        reflection_dir = reflect(self.direction, normal_hit)
        alignment = max(0.0, -np.dot(reflection_dir, ray.direction))
        if alignment == 0.0:
            return diffuse
        specular = self.color * (alignment ** mat.p * mat.k_s)

        return diffuse + specular

class AmbientLight:

    def __init__(self, intensity):
        """Create an ambient light of given intensity
        """
        self.intensity = intensity

    def illuminate(self, ray, hit, scene):
        """Compute the shading at a surface point due to this light.
        """
        return hit.material.color * self.intensity

class NormalLight:

    def illuminate(self, ray, hit, scene):
        """Color the surface with its normal, for debugging geometry."""
        return normal_color(hit.normal)


class Scene:

    def __init__(self, surfs, bg_color=(0, 0, 0)):
        """Create a scene containing the given objects.

        bg_color is the 8 bit color of pixels whose ray hits nothing.
        """
        self.surfs = surfs
        self.bg_color = np.array(bg_color, np.uint8)

    def intersect(self, ray):
        """Computes the first (smallest t) intersection between a ray and the scene.

        Ties go to the surface listed first.
        """
        closest_hit = no_hit
        for surf in self.surfs:
            hit = surf.intersect(ray)
            if hit.t < closest_hit.t:
                closest_hit = hit
        return closest_hit


def shade(ray, hit, scene, lights):
    """Sum the contribution of every light at a hit and quantize it to a pixel color."""
    light = np.zeros(3)
    for L in lights:
        light = light + L.illuminate(ray, hit, scene)
    return rgb8_from_light(light)


def render_image(camera, scene, lights, nx, ny):
    """
    render a ray traced image.

    Pixel (x, y) is written at row y of the buffer, with row 0 at the
    bottom of the picture.
    """
    output_image = Image.SolidImage((ny, nx))
    output_image.clear(scene.bg_color)

    for y in range(ny):
        print(f"rendering row {y+1}/{ny}...")
        cam_y = y / ny - 0.5
        for x in range(nx):
            cam_x = x / nx - 0.5

            ray = camera.generate_ray((cam_x, cam_y))
            hit = scene.intersect(ray)
            # no intersection, keep the background
            if hit.t == np.inf:
                continue

            output_image.setPixel(x, y, shade(ray, hit, scene, lights))

    return output_image
