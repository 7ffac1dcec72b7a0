import datetime
import os
from unittest.mock import patch

import pytest

from serial_roller.commit import read_serial_file, commit_serial, roll_file, old_file_path
from serial_roller.error import SerialIOError, InvalidFormatError, InvalidDateError, CounterOverflowError

MAY_27 = datetime.date(2001, 5, 27)
MAY_28 = datetime.date(2001, 5, 28)


def _read(path):
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def _write(path, content):
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)


@pytest.fixture
def serial_file(tmp_path):
    path = str(tmp_path / 'zone.serial')
    _write(path, '2001052742 garbage-text\nsecond line\n')
    return path


@pytest.mark.unittest
class TestReadSerialFile:
    def test_read(self, serial_file):
        assert read_serial_file(serial_file) == '2001052742 garbage-text\nsecond line\n'

    def test_newlines_kept(self, tmp_path):
        path = str(tmp_path / 'zone.serial')
        _write(path, 'zone\r2001052701\r\n')
        assert read_serial_file(path) == 'zone\r2001052701\r\n'

    def test_missing(self, tmp_path):
        path = str(tmp_path / 'missing.serial')
        with pytest.raises(SerialIOError) as exc_info:
            read_serial_file(path)
        assert exc_info.value.path == path
        assert exc_info.value.exit_code == 6
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_not_utf8(self, tmp_path):
        path = str(tmp_path / 'binary.serial')
        with open(path, 'wb') as f:
            f.write(b'\xff\xfe2001052742')
        with pytest.raises(SerialIOError) as exc_info:
            read_serial_file(path)
        assert 'UTF-8' in str(exc_info.value)


@pytest.mark.unittest
class TestCommitSerial:
    def test_commit(self, serial_file):
        old_path = commit_serial(serial_file, '2001052743')
        assert old_path == serial_file + '.old'
        assert old_file_path(serial_file) == old_path
        assert _read(serial_file) == '2001052743'
        assert _read(old_path) == '2001052742 garbage-text\nsecond line\n'

    def test_overwrites_old_file(self, serial_file):
        _write(serial_file + '.old', 'stale content')
        commit_serial(serial_file, '2001052743')
        assert _read(serial_file + '.old') == '2001052742 garbage-text\nsecond line\n'

    def test_missing_file(self, tmp_path):
        path = str(tmp_path / 'missing.serial')
        with pytest.raises(SerialIOError):
            commit_serial(path, '2001052743')
        assert not os.path.exists(path)
        assert not os.path.exists(path + '.old')

    def test_write_failure_keeps_old(self, serial_file):
        real_open = open

        def _open(file, mode='r', *args, **kwargs):
            if file == serial_file and 'w' in mode:
                raise PermissionError(13, 'Permission denied')
            return real_open(file, mode, *args, **kwargs)

        with patch('builtins.open', side_effect=_open):
            with pytest.raises(SerialIOError) as exc_info:
                commit_serial(serial_file, '2001052743')
        assert 'previous content is kept' in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert not os.path.exists(serial_file)
        assert _read(serial_file + '.old') == '2001052742 garbage-text\nsecond line\n'


@pytest.mark.unittest
class TestRollFile:
    def test_same_day(self, serial_file):
        assert roll_file(serial_file, today=MAY_27) == '2001052743'
        assert _read(serial_file) == '2001052743'
        assert _read(serial_file + '.old') == '2001052742 garbage-text\nsecond line\n'

    def test_other_day(self, serial_file):
        assert roll_file(serial_file, today=MAY_28) == '2001052801'
        assert _read(serial_file) == '2001052801'

    def test_twice_same_day(self, tmp_path):
        path = str(tmp_path / 'zone.serial')
        _write(path, '2001052701')
        assert roll_file(path, today=MAY_27) == '2001052702'
        assert roll_file(path, today=MAY_27) == '2001052703'
        assert _read(path) == '2001052703'
        assert _read(path + '.old') == '2001052702'

    def test_defaults_to_local_today(self, serial_file):
        with patch('serial_roller.commit.local_today', return_value=MAY_28):
            assert roll_file(serial_file) == '2001052801'

    def test_dry_run(self, serial_file):
        assert roll_file(serial_file, today=MAY_27, dry_run=True) == '2001052743'
        assert _read(serial_file) == '2001052742 garbage-text\nsecond line\n'
        assert not os.path.exists(serial_file + '.old')

    def test_logs_roll(self, serial_file, caplog):
        caplog.set_level('INFO')
        roll_file(serial_file, today=MAY_27)
        assert 'Serial rolled: 2001052742 -> 2001052743' in caplog.text

    def test_dry_run_log(self, serial_file, caplog):
        caplog.set_level('INFO')
        roll_file(serial_file, today=MAY_27, dry_run=True)
        assert 'Serial rolled' not in caplog.text
        assert '2001052742 would roll to 2001052743' in caplog.text

    def test_carriage_return_is_not_a_line_break(self, tmp_path):
        path = str(tmp_path / 'zone.serial')
        _write(path, 'zone\r2001052701\nnext line')
        assert roll_file(path, today=MAY_27) == '2001052702'
        assert _read(path + '.old') == 'zone\r2001052701\nnext line'

    def test_crlf_line_endings(self, tmp_path):
        path = str(tmp_path / 'zone.serial')
        _write(path, '2001052701\r\n')
        assert roll_file(path, today=MAY_27) == '2001052702'

    @pytest.mark.parametrize(['content', 'error_type'], [
        ('notaserial', InvalidFormatError),
        ('2001133005', InvalidDateError),
        ('2001052799', CounterOverflowError),
    ])
    def test_failure_leaves_files_untouched(self, tmp_path, content, error_type):
        path = str(tmp_path / 'zone.serial')
        _write(path, content)
        with pytest.raises(error_type):
            roll_file(path, today=MAY_27)
        assert _read(path) == content
        assert not os.path.exists(path + '.old')

    def test_missing_file(self, tmp_path):
        with pytest.raises(SerialIOError):
            roll_file(str(tmp_path / 'missing.serial'), today=MAY_27)
