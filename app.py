import math

from flask import Flask, jsonify, request

from geodistance import Coordinate, DistanceService
from geodistance.config import DEFAULT_WIDTH_MILES

app = Flask(__name__)


class BadParameter(ValueError):
    """A query parameter that is missing, non-numeric or not finite."""


def _float_arg(name: str, default=None) -> float:
    """Pull a finite numeric query parameter, raising BadParameter otherwise."""
    raw = request.args.get(name, "").strip()
    if not raw:
        if default is not None:
            return default
        raise BadParameter(f"Missing query parameter '{name}'.")
    try:
        value = float(raw)
    except ValueError:
        raise BadParameter(f"Query parameter '{name}' must be numeric, got {raw!r}.") from None
    if not math.isfinite(value):
        raise BadParameter(f"Query parameter '{name}' must be finite, got {raw!r}.")
    return value


@app.errorhandler(BadParameter)
def bad_request(exc):
    app.logger.warning("Rejected %s: %s", request.path, exc)
    return jsonify(error=str(exc)), 400


@app.route("/distance", methods=["GET"])
def distance():
    start = Coordinate(_float_arg("start_lat"), _float_arg("start_lon"))
    end = Coordinate(_float_arg("end_lat"), _float_arg("end_lon"))

    app.logger.info("Computing distance %s -> %s", start, end)
    miles = DistanceService.get_distance_between_points(start, end)

    return jsonify(
        start=start.to_dict(),
        end=end.to_dict(),
        distance_miles=miles,
    )


@app.route("/bounding-box", methods=["GET"])
def bounding_box():
    center = Coordinate(_float_arg("lat"), _float_arg("lon"))
    width = _float_arg("width", DEFAULT_WIDTH_MILES)

    app.logger.info("Computing box around %s (width %s mi)", center, width)
    box = DistanceService.get_bounding_box(center, width)

    return jsonify(
        center=center.to_dict(),
        width_miles=width,
        extent=box.to_extent(),
        **box.to_dict(),
    )


if __name__ == "__main__":
    # For development only – use a proper WSGI server in production
    app.run(debug=True, host="0.0.0.0", port=5000)
