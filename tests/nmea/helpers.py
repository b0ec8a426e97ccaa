"""Helper factories for NMEA tests."""

from marinenav.nmea.checksum import calculate_checksum


def with_checksum(body: str) -> str:
    """Append the correct ``*hh`` suffix to ``body`` (which starts with '$' or '!')."""
    return f"{body}*{calculate_checksum(body[1:]):02X}"


WPL_RUSKI = "$GPWPL,5536.200,N,01436.500,E,RUSKI*1F"
RMB_RUSKI = "$GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V*58"
GGA_MUNICH = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
VTG_MOVING = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"
VTG_STATIONARY = "$GNVTG,,T,,M,0.0,N,0.0,K,A*3D"
