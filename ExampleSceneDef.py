import tracer
from ImLite import DEFAULT_PPI
from utils import *

# [rows, cols] of the rendered picture
OUTPUT_SHAPE = [1080, 1920]
OUTPUT_PPI = DEFAULT_PPI
BG_COLOR = [0, 0, 0]

# world-space width of the image plane; its height follows the picture's aspect
CAMERA_WIDTH = 10.0
FOV_DEG = 80.0


class ExampleSceneDef(object):
    def __init__(self, camera, scene, lights):
        self.camera = camera;
        self.scene = scene;
        self.lights = lights;

    def render(self, output_path=None, output_shape=None, ppi=None):
        if(output_shape is None):
            output_shape = OUTPUT_SHAPE;
        if(ppi is None):
            ppi = OUTPUT_PPI;
        im = tracer.render_image(self.camera, self.scene, self.lights, output_shape[1], output_shape[0]);
        if(output_path is None):
            return im;
        else:
            im.writeToFile(output_path, ppi=ppi);


def make_camera(output_shape=None, width=CAMERA_WIDTH, fov_deg=FOV_DEG):
    """Camera at the origin looking along +y with +z up, matching the picture's aspect ratio."""
    if(output_shape is None):
        output_shape = OUTPUT_SHAPE;
    height = width * output_shape[0] / output_shape[1]
    return tracer.Camera(
        center=vec([0, 0, 0]),
        forward=vec([0, 1, 0]),
        up=vec([0, 0, 1]),
        width=width,
        height=height,
        focal_distance=tracer.focal_distance_from_fov(width, fov_deg),
    )


def SingleSphereExample(output_shape=None):
    red = tracer.Material(vec([0.75, 0.125, 0.125]), k_d=0.20, k_s=0.20, p=10)

    scene = tracer.Scene([
        tracer.Sphere(vec([0, 10, 0]), 4.0, red),
    ], bg_color=BG_COLOR)

    lights = [
        # yellow
        tracer.DirectionalLight(vec([-1, 1, 1]), color=vec([1, 1, 0]), intensity=5.0),
        tracer.AmbientLight(0.1),
    ]
    camera = make_camera(output_shape)
    return ExampleSceneDef(camera=camera, scene=scene, lights=lights);


def NormalsExample(output_shape=None):
    scene = tracer.Scene([
        tracer.Sphere(vec([0, 10, 0]), 4.0, tracer.Material()),
    ], bg_color=BG_COLOR)

    lights = [
        tracer.NormalLight(),
    ]
    camera = make_camera(output_shape)
    return ExampleSceneDef(camera=camera, scene=scene, lights=lights);
