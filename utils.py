import numpy as np

def vec(list):
    """Handy shorthand to make a double-precision float array."""
    return np.array(list, dtype=np.float64)

def normalize(v):
    """Return a unit vector in the direction of the vector v.

    The argument is left untouched; a new array is returned.
    """
    return v / np.linalg.norm(v)

def length(v):
    return np.linalg.norm(v)

def reflect(v, n):
    """Reflect the direction v about the unit normal n."""
    return v - 2.0 * np.dot(v, n) * n


def rgb8_from_light(light):
    """Convert an rgb floating point light color to 24 bit rgb.

    Light is measured from 0 (no light) to +inf. Each channel is clamped to
    [0, 1] and then mapped to [0, 255]; the fractional part is dropped.
    """
    return (np.clip(light, 0.0, 1.0) * 255).astype(np.uint8)

def normal_color(normal):
    """Map a unit normal from [-1, 1]^3 to a light color in [0, 1]^3.

    Useful to debug the geometry: each axis shows up in one channel.
    """
    return (normal + 1.0) / 2.0
