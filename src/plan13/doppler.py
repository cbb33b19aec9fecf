"""Doppler correction of radio frequencies.

With a positive range rate the satellite is receding: the downlink is
received lower than transmitted and the uplink must be sent higher so the
satellite hears it on frequency.
"""

SPEED_OF_LIGHT_KMS = 299792.0
"""Speed of light, rounded as in the Plan13 model. Units: *km/s*"""


def doppler_offset(range_rate: float, frequency_mhz: float) -> float:
    """Return the Doppler shift of a frequency.

    Args:
        range_rate: Range rate, positive receding. Units: *km/s*
        frequency_mhz: Nominal frequency. Units: *MHz*

    Returns:
        float: Shift ``-f * range_rate / c``. Units: *MHz*
    """
    return -frequency_mhz * range_rate / SPEED_OF_LIGHT_KMS


def doppler_shift(range_rate: float, frequency_mhz: float, uplink: bool = False) -> float:
    """Return a Doppler-corrected frequency.

    Args:
        range_rate: Range rate, positive receding. Units: *km/s*
        frequency_mhz: Nominal frequency. Units: *MHz*
        uplink: ``True`` for the transmit (uplink) frequency to set on the
            ground, ``False`` for the received (downlink) frequency.

    Returns:
        float: Corrected frequency. Units: *MHz*

    Examples:
        ```python
        from plan13.doppler import doppler_shift
        doppler_shift(-5.0, 145.8)  # downlink heard ~2.4 kHz high
        ```
    """
    shift = doppler_offset(range_rate, frequency_mhz)
    if uplink:
        return frequency_mhz - shift
    return frequency_mhz + shift
