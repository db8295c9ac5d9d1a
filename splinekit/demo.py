import logging

from . import Spline, SplineOptions

logger = logging.getLogger(__name__)

DEMO_POINTS = [(40, 120), (160, 40), (300, 150), (420, 60)]
DEMO_INSERTS = [(230, 90), (10, 130), (700, 700)]


def _format_pair(pair):
    return f"({pair[0]:.4g}, {pair[1]:.4g})"


def run(use_const_velocity: bool = True) -> Spline:
    spline = Spline.from_points(DEMO_POINTS, SplineOptions(use_const_velocity=use_const_velocity))
    print(f"Points: {[p.as_tuple() for p in spline.points]}\n")

    for i, j in DEMO_INSERTS:
        match = spline.nearest_curve(i, j)
        index = spline.insert_point(i, j)
        print(f"Insert ({i}, {j}): matched {match.kind} (index={match.index}) -> placed at {index}")

    print("\nSegments:")
    for k, segment in enumerate(spline.curve):
        coeffs = ", ".join(_format_pair(segment.coefficient(p)) for p in range(4))
        print(f"  [{k}] t_max={segment.t_max:.4g} a0..a3 = {coeffs}")

    logger.info("Demo finished with %d points and %d segments", len(spline), len(spline.curve))
    return spline


if __name__ == "__main__":
    run()
