"""MEGA API error codes and exceptions."""
from typing import Dict, Optional

from ...exceptions import MegaException


class APIErrorCodes:
    """MEGA API error codes."""
    
    EINTERNAL = -1
    EARGS = -2
    EAGAIN = -3
    ERATELIMIT = -4
    ENOENT = -9
    ECIRCULAR = -10
    EACCESS = -11
    EEXIST = -12
    EKEY = -14
    ESID = -15
    EOVERQUOTA = -17
    ETEMPUNAVAIL = -18
    
    ERROR_CODES: Dict[int, str] = {
        1: 'EINTERNAL (-1): An internal error has occurred.',
        2: 'EARGS (-2): You have passed invalid arguments to this command.',
        3: 'EAGAIN (-3): A temporary congestion or server malfunction prevented your request from being processed. No data was altered.',
        4: 'ERATELIMIT (-4): You have exceeded your command weight per time quota. Please wait a few seconds, then try again.',
        6: 'ETOOMANY (-6): Too many concurrent connections or requests.',
        9: 'ENOENT (-9): Object (typically, node or user) not found.',
        10: 'ECIRCULAR (-10): Circular linkage attempted',
        11: 'EACCESS (-11): Access violation (e.g., trying to write to a read-only share)',
        12: 'EEXIST (-12): Trying to create an object that already exists',
        13: 'EINCOMPLETE (-13): Trying to access an incomplete resource',
        14: 'EKEY (-14): A decryption operation failed',
        15: 'ESID (-15): Invalid or expired user session, please relogin',
        16: 'EBLOCKED (-16): User blocked',
        17: 'EOVERQUOTA (-17): Request over quota',
        18: 'ETEMPUNAVAIL (-18): Resource temporarily not available, please try again later',
        19: 'ETOOMANYCONNECTIONS (-19)',
        24: 'EGOINGOVERQUOTA (-24)',
        25: 'EROLLEDBACK (-25)',
        26: 'EMFAREQUIRED (-26): Multi-Factor Authentication Required',
    }
    
    @classmethod
    def get_message(cls, code: int) -> str:
        """Gets error message for error code."""
        return cls.ERROR_CODES.get(abs(code), f"Unknown error: {code}")
    
    @staticmethod
    def is_error(result) -> bool:
        """Checks whether an API result is a negative error code."""
        return isinstance(result, int) and not isinstance(result, bool) and result < 0


class MegaAPIError(MegaException):
    """Exception raised for MEGA API errors."""
    
    def __init__(self, code: int, message: Optional[str] = None):
        self.code = code
        super().__init__(message or APIErrorCodes.get_message(code), code)
