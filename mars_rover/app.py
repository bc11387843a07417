# app.py — Flask API over a decoded rover map (cell / feasibility / command queries)
# deps: pip install flask numpy pillow

from __future__ import annotations
import io, logging
import numpy as np
from flask import Flask, request, jsonify, make_response
from PIL import Image

from mars_rover.config import MAP_PATH, API_HOST, API_PORT, INPUT_ERROR_MESSAGE, IMPASSABLE
from mars_rover.models import GridMap
from mars_rover.decoder import decode_map
from mars_rover.queries import cell_info, goal_feasibility, run_commands
from mars_rover.exceptions import InputValidationError, MapReadError

app = Flask(__name__)
app.config.setdefault("MAP_PATH", MAP_PATH)
app.config.setdefault("GRID_MAP", None)

# ======= map loading =======
def current_map() -> GridMap:
    grid = app.config.get("GRID_MAP")
    if grid is None:
        path = app.config.get("MAP_PATH")
        if not path:
            raise MapReadError(path, "no map configured (set ROVER_MAP_PATH)")
        grid = decode_map(path)
        app.config["GRID_MAP"] = grid
    return grid

# ======= errors =======
@app.errorhandler(InputValidationError)
def _input_error(e):
    app.logger.info("rejected request %s: %s", request.path, e)
    return jsonify({"error": INPUT_ERROR_MESSAGE, "detail": str(e)}), 400

@app.errorhandler(MapReadError)
def _map_error(e):
    app.logger.error("map unavailable: %s", e)
    return jsonify({"error": INPUT_ERROR_MESSAGE, "detail": str(e)}), 503

# ======= query endpoints =======
@app.route("/", methods=["GET"])
def root():
    return {"ok": True, "map": app.config.get("MAP_PATH"),
            "endpoints": ["/map/cell", "/map/goals", "/map/feasible", "/rover/simulate (POST JSON)", "/map/preview.png"]}

@app.route("/map/cell", methods=["GET"])
def map_cell():
    return jsonify(cell_info(current_map(), request.args.get("x"), request.args.get("y")))

@app.route("/map/goals", methods=["GET"])
def map_goals():
    grid = current_map()
    ox, oy = grid.rover_origin
    return jsonify({"rover_origin": {"x": ox, "y": oy},
                    "goals": [{"index": i, "x": x, "y": y} for i, (x, y) in enumerate(grid.goals)]})

@app.route("/map/feasible", methods=["GET"])
def map_feasible():
    return jsonify(goal_feasibility(current_map(), request.args.get("goal")))

@app.route("/rover/simulate", methods=["POST"])
def rover_simulate():
    """
    JSON body:
    {
      "commands": "forward 3 left 90 forward 2 end"   // or a list of tokens
    }
    """
    data = request.get_json(force=True, silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InputValidationError("request body must be a JSON object")
    commands = data.get("commands")
    if not isinstance(commands, (str, list)):
        raise InputValidationError("commands must be a string or a list of tokens")
    return jsonify(run_commands(current_map(), commands))

@app.route("/map/preview.png", methods=["GET"])
def map_preview():
    grid = current_map()
    # height 0..7 -> 31..255 gray, impassable cells black; flip so North is up
    img = (grid.height.astype(np.uint16) + 1) * 32 - 1
    img = np.where(grid.terrain == IMPASSABLE, 0, img).astype("uint8")
    img = np.flipud(img)
    scale = max(1, min(8, request.args.get("scale", 1, type=int)))
    buf = io.BytesIO()
    pic = Image.fromarray(np.ascontiguousarray(img))
    if scale > 1:
        pic = pic.resize((pic.width * scale, pic.height * scale), Image.Resampling.NEAREST)
    pic.save(buf, "PNG")
    buf.seek(0)
    resp = make_response(buf.read())
    resp.headers["Content-Type"] = "image/png"
    return resp


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    current_map()
    app.run(host=API_HOST, port=API_PORT, threaded=True)
