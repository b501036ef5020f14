# region Imports
import argparse
import sys
from xmrg.dates import parse_xmrg_datetime
from xmrg.features import write_features_csv, write_features_json
from xmrg.log import get_logger, set_level
from xmrg.reader import read_grid
from xmrg.stats import average, maximum
# endregion

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_UNSUPPORTED = 1
EXIT_IO = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="xmrg", description="Decode an XMRG precipitation grid.")
    p.add_argument("file", help="XMRG file (optionally gzip-compressed)")
    p.add_argument("--csv", metavar="OUT", help="write lon,lat,value lines")
    p.add_argument("--json", metavar="OUT", help="write features as JSON")
    p.add_argument("--geotiff", metavar="OUT", help="write a GeoTIFF in the HRAP projection")
    p.add_argument("--plot", action="store_true", help="show a matplotlib preview")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return p


def _fmt(v):
    return "n/a" if v is None else f"{v:.2f} mm"


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        set_level(args.log_level)

    try:
        grid = read_grid(args.file)
    except OSError as e:
        logger.error("Could not read %s: %s", args.file, e)
        return EXIT_IO

    h = grid.header
    print(f"File:     {args.file}")
    print(f"Version:  {grid.version.value}")
    print(f"Grid:     {h.columns} x {h.rows} at HRAP ({h.origin_x}, {h.origin_y})")
    try:
        print(f"Valid:    {parse_xmrg_datetime(args.file):%Y-%m-%d %H:00}")
    except ValueError:
        pass

    if not grid.version.decodable:
        logger.error("Version %r cannot be decoded", grid.version.value)
        return EXIT_UNSUPPORTED

    print(f"Average:  {_fmt(average(grid))}")
    print(f"Max:      {_fmt(maximum(grid))}")

    try:
        if args.csv:
            write_features_csv(grid, args.csv)
        if args.json:
            write_features_json(grid, args.json)
        if args.geotiff:
            from xmrg.export import write_geotiff  # rasterio is slow to import
            write_geotiff(grid, args.geotiff)
    except OSError as e:
        logger.error("Export failed: %s", e)
        return EXIT_IO
    if args.plot:
        from xmrg.viz import show_grid
        show_grid(grid, title=args.file)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
