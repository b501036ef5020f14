import io
import struct
import pytest

from xmrg.byte_reader import ShortReadError, detect_endian
from xmrg.header import classify_version, read_header, resolve_header
from xmrg.models import Endian, FormatVersion, Header


@pytest.mark.parametrize("marker, columns, expected", [
    (66, 100, FormatVersion.BUILD5),
    (66, 33, FormatVersion.BUILD5),     # 66 == 2 * 33, fixed marker wins
    (38, 100, FormatVersion.BUILD4),
    (38, 19, FormatVersion.BUILD4),
    (200, 100, FormatVersion.LEGACY),
    (2 * 335, 335, FormatVersion.LEGACY),
    (199, 100, FormatVersion.UNRECOGNIZED),
    (37, 100, FormatVersion.UNRECOGNIZED),
    (0, 0, FormatVersion.UNRECOGNIZED),
])
def test_classify_version(marker, columns, expected):
    assert classify_version(marker, columns) is expected


def test_only_legacy_is_decodable():
    assert FormatVersion.LEGACY.decodable
    assert not FormatVersion.BUILD4.decodable
    assert not FormatVersion.BUILD5.decodable
    assert not FormatVersion.UNRECOGNIZED.decodable


def test_read_header():
    fd = io.BytesIO(struct.pack("<4i", 10, 20, 335, 159))
    assert read_header(fd, Endian.LITTLE) == Header(10, 20, 335, 159)


@pytest.mark.parametrize("bos", [">", "<"])
def test_resolve_header(make_xmrg, bos):
    fd = io.BytesIO(make_xmrg([[1, 2, 3]], origin=(5, 6), bos=bos))
    endian = detect_endian(fd)
    header, version = resolve_header(fd, endian)
    assert header == Header(origin_x=5, origin_y=6, columns=3, rows=1)
    assert version is FormatVersion.LEGACY
    # probe word + header + pad + marker
    assert fd.tell() == 28


def test_resolve_header_build5(make_xmrg):
    fd = io.BytesIO(make_xmrg([[1, 2]], marker=66))
    header, version = resolve_header(fd, detect_endian(fd))
    assert version is FormatVersion.BUILD5
    assert header.columns == 2


def test_resolve_header_truncated(make_xmrg):
    fd = io.BytesIO(make_xmrg([[1, 2]])[:14])
    with pytest.raises(ShortReadError):
        resolve_header(fd, detect_endian(fd))
