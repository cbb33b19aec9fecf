import pytest

from plan13.doppler import SPEED_OF_LIGHT_KMS, doppler_offset, doppler_shift


class TestDoppler:
    def test_zero_range_rate(self):
        assert doppler_shift(0.0, 145.8) == 145.8
        assert doppler_shift(0.0, 145.8, uplink=True) == 145.8

    def test_receding(self):
        assert doppler_shift(5.0, 435.0) < 435.0
        assert doppler_shift(5.0, 435.0, uplink=True) > 435.0

    def test_approaching(self):
        assert doppler_shift(-5.0, 435.0) > 435.0
        assert doppler_shift(-5.0, 435.0, uplink=True) < 435.0

    @pytest.mark.parametrize("rr", [-7.2, -1.0, 0.3, 6.9])
    def test_uplink_downlink_symmetric(self, rr):
        f = 2401.5
        assert doppler_shift(rr, f, uplink=True) - f == pytest.approx(
            -(doppler_shift(rr, f) - f), abs=1e-12
        )

    def test_offset_value(self):
        assert doppler_offset(-1.0, 299.792) == pytest.approx(0.001, rel=1e-12)
        # 7 km/s at 2m band is about 3.4 kHz
        assert abs(doppler_offset(7.0, 145.8)) == pytest.approx(0.0034, abs=1e-4)

    def test_speed_of_light(self):
        assert SPEED_OF_LIGHT_KMS == 299792.0
