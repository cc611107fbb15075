import pytest

from pyconfreader.conf.classifier import classify, count_entries
from pyconfreader.conf.consts import LineKind
from pyconfreader.conf.model import ConfSyntaxError, Line, Span
from pyconfreader.conf.scanner import scan_lines, terminate


def test_terminate_appends_missing_line_feed() -> None:
    assert terminate(b'a=1') == b'a=1\n'
    assert terminate(b'a=1\n') == b'a=1\n'
    assert terminate(b'a=1\r') == b'a=1\r\n'
    assert terminate(b'') == b''


def test_scan_lines_skips_leading_blanks_and_terminators() -> None:
    buf = b'a=1\r\n  \tb = 2\n\n'
    lines = scan_lines(buf)
    assert lines == [
        Line(1, Span(0, 3)),
        Line(2, Span(8, 13)),
        Line(3, Span(14, 14)),
    ]
    assert buf[8:13] == b'b = 2'
    assert len(lines) == buf.count(b'\n')


def test_scan_lines_blank_line_with_crlf() -> None:
    lines = scan_lines(b'   \r\nx=1\n')
    assert lines[0].span.length == 0
    assert lines[1] == Line(2, Span(5, 8))


@pytest.mark.parametrize('buf, lineno', [
    (b'a=1\rb=2\n', 1),
    (b'a=1\n[x]\rfoo\n', 2),
    (b'a=1\r\n\r\r\n', 2),
])
def test_scan_lines_rejects_lone_carriage_return(
    buf: bytes, lineno: int
) -> None:
    with pytest.raises(ConfSyntaxError) as exc:
        scan_lines(buf)
    assert exc.value.lineno == lineno


def test_classify_and_count() -> None:
    buf = b'# c\n; c\n\n[s]\nk=v\n  k2 = v\n[t]\n'
    lines = scan_lines(buf)
    assert [classify(buf, i) for i in lines] == [
        LineKind.COMMENT, LineKind.COMMENT, LineKind.BLANK,
        LineKind.SECTION, LineKind.PARAM, LineKind.PARAM, LineKind.SECTION,
    ]
    # implicit section included
    assert count_entries(buf, lines) == (3, 2)


def test_count_empty_source() -> None:
    assert count_entries(b'', []) == (1, 0)
