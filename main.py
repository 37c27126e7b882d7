"""
polyset Demo
============

Runs every set operation on a square and a triangle, prints the results,
then folds a union over both and saves it (CSV + rendering) in a
timestamped run folder under the configured output_dir.
"""

import cv2

from polyset_geometry import (
    Polygon,
    PolysetConfig,
    SetOperation,
    apply_ops,
    compute_intersection,
    compute_subtraction,
    compute_union,
)
from polyset_geometry.rendering import PolygonVisualizer
from polyset_io import format_polygon, write_polygon
from utils import get_target_run_folder


def main():
    config = PolysetConfig()
    geometry = config.geometry

    square = Polygon.from_coordinates([(0, 0), (4, 0), (4, 4), (0, 4)])
    triangle = Polygon.from_coordinates([(2, 2), (6, 2), (4, 6)])

    print("union")
    print(format_polygon(compute_union(triangle, square, geometry)))

    print("intersection")
    print(format_polygon(compute_intersection(triangle, square, geometry)))

    print("triangle - square")
    print(format_polygon(compute_subtraction(triangle, square, geometry)))

    print("square - triangle")
    print(format_polygon(compute_subtraction(square, triangle, geometry)))

    result = apply_ops([triangle, square], SetOperation.UNION, geometry)

    target_run_folder = get_target_run_folder(
        application_name="polyset", base_dir=str(config.output_dir)
    )
    write_polygon(result, f"{target_run_folder}/output.csv")

    visualizer = PolygonVisualizer(config=config.render)
    frame, _ = visualizer.render(operands=[triangle, square], result=result)
    cv2.imwrite(f"{target_run_folder}/output.png", frame)

    if square.equals(triangle, geometry):
        print("Polygons are equal.")
    else:
        print("Polygons are not equal.")


if __name__ == "__main__":
    main()
