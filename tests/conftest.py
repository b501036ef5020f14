import gzip
import struct
import pytest
import matplotlib

matplotlib.use("Agg")


def build_xmrg(raw_rows, origin=(0, 0), bos=">", marker=None, truncate=0):
    """Legacy XMRG bytes: header record, then one Fortran record per row."""
    rows = len(raw_rows)
    columns = len(raw_rows[0]) if rows else 0
    marker = 2 * columns if marker is None else marker

    out = struct.pack(bos + "i", 16)
    out += struct.pack(bos + "4i", origin[0], origin[1], columns, rows)
    out += struct.pack(bos + "i", 16)
    first = True
    for row in raw_rows:
        lead = marker if first else 2 * columns
        first = False
        out += struct.pack(bos + "i", lead)
        out += struct.pack(bos + "%dh" % columns, *row)
        out += struct.pack(bos + "i", 2 * columns)
    if not raw_rows:
        out += struct.pack(bos + "i", marker)
    return out[:len(out) - truncate] if truncate else out


@pytest.fixture
def make_xmrg():
    return build_xmrg


@pytest.fixture
def raw_2x2():
    # row 0 is stored first on disk
    return [[250, -1], [0, 1234]]


@pytest.fixture
def xmrg_file(tmp_path, raw_2x2):
    path = tmp_path / "xmrg0506199516z"
    path.write_bytes(build_xmrg(raw_2x2, origin=(367, 263)))
    return path


@pytest.fixture
def xmrg_gz_file(tmp_path, raw_2x2):
    path = tmp_path / "xmrg0506199516z.gz"
    path.write_bytes(gzip.compress(build_xmrg(raw_2x2, origin=(367, 263), bos="<")))
    return path
