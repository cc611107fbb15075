from pathlib import Path

import pytest

from pyconfreader import (
    BytesSource,
    ConfReadError,
    ConfStatus,
    FileSource,
    guess_codec
)
from pyconfreader.sources import as_source


def test_bytes_source() -> None:
    assert BytesSource(b'a=1').read() == b'a=1'
    assert BytesSource(bytearray(b'a=1')).read() == b'a=1'
    assert BytesSource('ä=1', 'latin-1').read() == b'\xe4=1'
    assert 'bytes' in str(BytesSource(b''))


def test_file_source(tmp_path: Path) -> None:
    fn = tmp_path / 'x.conf'
    fn.write_bytes(b'a = 1\r\n')
    assert FileSource(fn).read() == b'a = 1\r\n'
    assert str(FileSource(fn)) == str(fn)


def test_file_source_read_error(tmp_path: Path) -> None:
    with pytest.raises(ConfReadError) as exc:
        FileSource(tmp_path / 'missing.conf').read()
    assert exc.value.status == ConfStatus.READ_FAILED
    assert 'missing.conf' in str(exc.value)


def test_as_source(tmp_path: Path) -> None:
    handler = BytesSource(b'')
    assert as_source(handler) is handler
    assert isinstance(as_source(b'a=1'), BytesSource)
    assert isinstance(as_source(memoryview(b'a=1')), BytesSource)
    assert isinstance(as_source(str(tmp_path)), FileSource)
    assert isinstance(as_source(tmp_path), FileSource)


def test_guess_codec_prefers_given_encoding() -> None:
    assert guess_codec(b'a = 1\n', 'utf-8') == 'utf-8'
    assert guess_codec('ключ = 1\n'.encode('cp1251'), 'cp1251') == 'cp1251'


def test_guess_codec_falls_back() -> None:
    assert guess_codec(b'a = \xff\xfe\n', 'utf-8') == 'latin-1'
    assert guess_codec(b'a = 1\n', 'no-such-codec') == 'latin-1'
    # nothing to detect
    assert guess_codec(b'') == 'utf-8'


def test_guess_codec_detected_codec_decodes() -> None:
    raw = 'имя = значение\n'.encode('utf-8') * 20
    codec = guess_codec(raw)
    assert raw.decode(codec) == 'имя = значение\n' * 20


def test_guess_codec_drops_bom_codecs() -> None:
    assert guess_codec(b'a = 1\n', 'utf-8-sig') == 'utf-8'
    assert guess_codec(b'a = 1\n', 'UTF-8-SIG') == 'utf-8'
    codec = guess_codec(b'\xef\xbb\xbfa = 1\nb = 2\n')
    assert 'b'.encode(codec) == b'b'
