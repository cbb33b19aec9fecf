import math

import pytest

from plan13.constants import DEFAULT_CONSTANTS, DEG2RAD, RAD2DEG, ModelConstants


class TestModelConstants:
    def test_defaults(self):
        c = DEFAULT_CONSTANTS
        assert c.re == 6378.137
        assert c.fl == pytest.approx(1.0 / 298.257224)
        assert c.yg == 2014
        assert c.g0 == 99.5828
        assert c.au == 149.597870700e6

    def test_derived(self):
        c = DEFAULT_CONSTANTS
        assert c.rp == pytest.approx(6356.752, abs=1e-3)
        assert c.we == pytest.approx(2.0 * math.pi + c.ww)
        # Sidereal rotation rate, 7.292e-5 rad/s
        assert c.w0 == pytest.approx(7.2921e-5, rel=1e-4)
        assert c.cns ** 2 + c.sns ** 2 == pytest.approx(1.0)

    def test_replace(self):
        c = DEFAULT_CONSTANTS._replace(yg=2030, g0=100.0)
        assert isinstance(c, ModelConstants)
        assert c.yg == 2030
        assert DEFAULT_CONSTANTS.yg == 2014

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONSTANTS.re = 6371.0


def test_angle_conversion_constants():
    assert DEG2RAD * RAD2DEG == pytest.approx(1.0)
    assert 180.0 * DEG2RAD == pytest.approx(math.pi)
