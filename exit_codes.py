# exit_codes.py
# Structured exit codes and the fatal error type shared by the game modules

from enum import Enum, IntEnum


class Severity(Enum):
    SUCCESS = 'success'
    INTERRUPTED = 'interrupted'
    ERROR = 'error'


class ExitCode(IntEnum):
    """24-bit diagnostic codes laid out as 0xCCMMmm (class, major, minor)."""

    SUCCESS = 0x000000
    INTERRUPT = 0x000101
    CONFIG_NO_FILE = 0x010101
    CONFIG_INVALID = 0x010102
    SCOREBOARD_UNREADABLE = 0x010201
    MENU_CASE_SLIP = 0x020101
    UNKNOWN = 0xFFFFFF

    @property
    def err_class(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def major(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def minor(self) -> int:
        return self.value & 0xFF

    def describe(self) -> str:
        return 'class = 0x%02X, major = 0x%02X, minor = 0x%02X' % (self.err_class, self.major, self.minor)

    @property
    def severity(self) -> Severity:
        if self is ExitCode.SUCCESS:
            return Severity.SUCCESS
        if self is ExitCode.INTERRUPT:
            return Severity.INTERRUPTED
        return Severity.ERROR

    @property
    def process_status(self) -> int:
        # POSIX only keeps the low byte, so the full code lives in the log
        if self.severity is Severity.SUCCESS:
            return 0
        if self.severity is Severity.INTERRUPTED:
            return 130
        return 1


class GameError(Exception):
    """Fatal condition that ends the process with ``exit_code``."""

    def __init__(self, exit_code: ExitCode, message: str = ''):
        super().__init__(message or exit_code.name)
        self.exit_code = exit_code
