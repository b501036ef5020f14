# app.py — Slim Flask API over the XMRG decoder
# deps: pip install flask numpy pillow

# region Imports
from __future__ import annotations
import os
from flask import Flask, request, jsonify, make_response
from werkzeug.security import safe_join

from xmrg.config import DATA_DIR
from xmrg.dates import parse_xmrg_datetime
from xmrg.features import csv_row, features_to_dicts, generate_features
from xmrg.log import get_logger
from xmrg.reader import read_grid
from xmrg.stats import summarize
from xmrg.viz import grid_to_png
# endregion

logger = get_logger(__name__)


class ApiError(Exception):
    def __init__(self, message: str, status: int):
        super().__init__(message)
        self.status = status


def create_app(data_dir: str = None) -> Flask:
    app = Flask(__name__)
    app.config["XMRG_DATA_DIR"] = os.path.abspath(data_dir or DATA_DIR)

    # region Helpers
    def _load():
        name = request.args.get("file", "")
        if not name:
            raise ApiError("file=NAME required", 400)
        path = safe_join(app.config["XMRG_DATA_DIR"], name)
        if path is None:
            raise ApiError(f"Invalid file name: {name}", 400)
        if not os.path.isfile(path):
            raise ApiError(f"No such file: {name}", 404)
        grid = read_grid(path)
        if not grid.version.decodable:
            raise ApiError(f"Unsupported XMRG version: {grid.version.value}", 422)
        if grid.is_empty:
            raise ApiError(f"No rows in {name}", 422)
        return name, grid

    @app.errorhandler(ApiError)
    def _api_error(e: ApiError):
        return jsonify({"error": str(e)}), e.status

    @app.errorhandler(OSError)
    def _io_error(e: OSError):
        logger.error("I/O error: %s", e)
        return jsonify({"error": f"I/O error: {e}"}), 500
    # endregion

    # ======= CORS =======
    @app.after_request
    def _cors(resp):
        resp.headers["Access-Control-Allow-Origin"]  = "*"
        resp.headers["Access-Control-Allow-Headers"] = "*"
        resp.headers["Access-Control-Allow-Methods"] = "GET,OPTIONS"
        return resp

    # ======= endpoints =======
    @app.route("/", methods=["GET"])
    def root():
        return {
            "ok": True,
            "data_dir": app.config["XMRG_DATA_DIR"],
            "summary": "/xmrg/summary?file=NAME",
            "features": "/xmrg/features?file=NAME&format=csv|json",
            "preview": "/xmrg/preview?file=NAME",
        }

    @app.route("/xmrg/summary", methods=["GET"])
    def xmrg_summary():
        name, grid = _load()
        out = summarize(grid)
        out["file"] = name
        try:
            out["valid_time"] = parse_xmrg_datetime(name).isoformat()
        except ValueError:
            out["valid_time"] = None
        return jsonify(out)

    @app.route("/xmrg/features", methods=["GET"])
    def xmrg_features():
        fmt = request.args.get("format", "csv").lower()
        if fmt not in ("csv", "json"):
            raise ApiError("format must be csv or json", 400)
        name, grid = _load()
        if fmt == "json":
            return jsonify({"file": name, "features": features_to_dicts(grid)})
        body = "".join(csv_row(f) + "\n" for f in generate_features(grid))
        resp = make_response(body)
        resp.headers["Content-Type"] = "text/csv"
        return resp

    @app.route("/xmrg/preview", methods=["GET"])
    def xmrg_preview():
        _, grid = _load()
        resp = make_response(grid_to_png(grid))
        resp.headers["Content-Type"] = "image/png"
        return resp

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8081)
