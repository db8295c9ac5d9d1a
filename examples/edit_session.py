"""Example: edit a spline the way a drawing tool would and query the curve."""

import logging

from splinekit import Spline, SplineOptions

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

    spline = Spline(SplineOptions(use_const_velocity=True, velocity=0.01))
    for i, j in [(20, 20), (140, 60), (260, 30)]:
        spline.add_point(i, j)

    # click near the middle of the curve, then drag the new knot upward
    index = spline.insert_point(200, 55)
    spline.set_point_coordinates(index, 200, 90)

    hit = spline.nearest_point(198, 88, max_dist=20)
    print(f"Grabbed point: {hit}")

    match = spline.nearest_curve(100, 70)
    print(f"Nearest curve to (100, 70): {match.kind} index={match.index} distance={match.distance:.3f}")

    for k, segment in enumerate(spline.curve):
        print(f"[{k}] t_max={segment.t_max:.4f} start={segment.start} end={segment.end}")

    polyline = spline.curve.sample(16)
    logger.info("Sampled %d points for drawing", len(polyline))


if __name__ == "__main__":
    main()
