"""
scratch/tests/test_console.py

Console helpers and the upload progress bar. No network.
"""

import io

from scratch.format import err, human_size, render
from scratch.progress import ProgressBar, ProgressReader


class _Tty(io.StringIO):
    def isatty(self):
        return True


class TestHumanSize:
    def test_bytes(self):
        assert human_size(512) == '512B'

    def test_kilobytes(self):
        assert human_size(2048) == '2.0K'

    def test_megabytes(self):
        assert 'M' in human_size(5 * 1024 * 1024)


class TestRender:
    def test_trims(self, capsys):
        render('  hello \n\n')
        assert capsys.readouterr().out == 'hello\n'

    def test_blank_prints_nothing(self, capsys):
        render(' \n')
        render('')
        render(None)
        assert capsys.readouterr().out == ''

    def test_err_goes_to_stderr(self, capsys, monkeypatch):
        monkeypatch.setenv('NO_COLOR', '1')
        err('boom')
        out, error = capsys.readouterr()
        assert out == ''
        assert error == '✗ boom\n'


class TestProgress:
    def test_silent_without_tty(self):
        stream = io.StringIO()
        bar = ProgressBar(10, label='uploading', stream=stream)
        bar.update(10)
        bar.done()
        assert stream.getvalue() == ''

    def test_reader_advances_bar(self, monkeypatch):
        monkeypatch.setenv('NO_COLOR', '1')
        stream = _Tty()
        bar = ProgressBar(8, label='uploading', stream=stream)
        reader = ProgressReader(io.BytesIO(b'12345678'), 8, bar)

        assert len(reader) == 8
        while reader.read(3):
            pass
        assert bar.sent == 8
        assert '100%' in stream.getvalue()

        bar.done()
        assert '✓ uploading' in stream.getvalue()

    def test_reader_close_closes_file(self):
        f = io.BytesIO(b'x')
        ProgressReader(f, 1, ProgressBar(1, stream=io.StringIO())).close()
        assert f.closed
