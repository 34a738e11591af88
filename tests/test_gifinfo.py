"""Run scripts/gifinfo.py as a user would."""
import os
import subprocess
import sys

import pytest


HEADER = b'GIF89a' + b'\x0a\x00' + b'\x05\x00' + b'\x80' + b'\x00' + b'\x00' + b'\x00\x00\x00\x01\x01\x01'
DESCRIPTOR = b'\x2c' + b'\x00\x00' + b'\x00\x00' + b'\x0a\x00' + b'\x05\x00' + b'\x00'


@pytest.fixture
def gifinfo(test_root_dir):
    script = str(test_root_dir / '..' / 'scripts' / 'gifinfo.py')
    env = dict(os.environ)
    env['PYTHONPATH'] = os.pathsep.join(filter(None, [str(test_root_dir / '..'), env.get('PYTHONPATH')]))
    env.pop('DEBUG', None)

    def _gifinfo(*args):
        return subprocess.run(
            [sys.executable, script, *args],
            capture_output=True,
            text=True,
            env=env,
        )

    return _gifinfo


def test_usage(gifinfo):
    result = gifinfo()

    assert result.returncode == 1
    assert result.stdout.startswith('usage: ')


def test_dump(gifinfo, tmp_path):
    path = tmp_path / 'minimal.gif'
    path.write_bytes(HEADER + DESCRIPTOR)

    result = gifinfo(str(path))

    assert result.returncode == 0
    assert 'GIF Header:' in result.stdout
    assert 'Logical screen:' in result.stdout
    assert 'Global Color Map: {size: 6}' in result.stdout
    assert '[00] 10x5+0+0' in result.stdout


def test_decode_error(gifinfo, tmp_path):
    path = tmp_path / 'bad.gif'
    path.write_bytes(b'PNG89a' + HEADER[6:] + DESCRIPTOR)

    result = gifinfo(str(path))

    assert result.returncode == 1
    assert f'cannot decode \'{path}\'' in result.stderr
    assert 'signature.magic' in result.stderr
    assert 'Traceback' not in result.stderr


def test_missing_file(gifinfo, tmp_path):
    path = tmp_path / 'missing.gif'

    result = gifinfo(str(path))

    assert result.returncode == 1
    assert f'cannot decode \'{path}\'' in result.stderr
    assert 'Traceback' not in result.stderr
