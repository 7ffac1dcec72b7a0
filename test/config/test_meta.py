import pytest

from serial_roller.config.meta import __TITLE__, __VERSION__, __AUTHOR__


@pytest.mark.unittest
class TestConfigMeta:
    def test_title(self):
        assert __TITLE__ == 'serial_roller'

    def test_author(self):
        assert __AUTHOR__ == 'serial_roller contributors'

    def test_version_exported(self):
        import serial_roller
        assert serial_roller.__version__ == __VERSION__
