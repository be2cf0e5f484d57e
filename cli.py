"""Command line entry point: render the single sphere scene to a BMP file."""

import argparse
import sys
import time

import tracer
from ExampleSceneDef import OUTPUT_PPI, OUTPUT_SHAPE, SingleSphereExample


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Ray trace a sphere into a BMP image", add_help=False)
    parser.add_argument("output", metavar="OUTPUT.bmp", help="Path of the bitmap to write")
    if argv is None:
        argv = sys.argv[1:]
    # the single argument is always a path, even when it starts with a dash
    return parser.parse_args(["--"] + list(argv))


def render(camera, scene, lights, argv=None, output_shape=None, ppi=None):
    """Render a scene and write it to the path given on the command line.

    Returns the process exit status. A bad argument count makes argparse
    print the usage and exit before anything is rendered.
    """
    args = parse_arguments(argv)
    if output_shape is None:
        output_shape = OUTPUT_SHAPE
    if ppi is None:
        ppi = OUTPUT_PPI

    print("Starting render...")
    start_time = time.time()
    image = tracer.render_image(camera, scene, lights, output_shape[1], output_shape[0])
    print(f"Render complete in: {time.time() - start_time:.2f} seconds")

    try:
        fp = open(args.output, "wb")
    except OSError as e:
        print(f"failed to open the output file: {e}", file=sys.stderr)
        return 1

    # buffered bytes may only fail to reach the disk when the file is closed
    try:
        with fp:
            image.writeToFile(fp, ppi=ppi)
    except (OSError, ValueError) as e:
        print(f"failed to write {args.output}: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {args.output}")
    return 0


def main(argv=None):
    scene_def = SingleSphereExample()
    return render(scene_def.camera, scene_def.scene, scene_def.lights, argv=argv)


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
