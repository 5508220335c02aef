import logging
from configparser import ConfigParser
from pathlib import Path

ini_file_path_posix = Path(__file__).parent / "settings.ini"
ini_file_path = str(ini_file_path_posix.absolute())

parser = ConfigParser()
parser.read(ini_file_path)

LOGGER_TRACE = 5
logging.addLevelName(LOGGER_TRACE, "TRACE")

log_level_mapper = {
    "notset": logging.NOTSET,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "trace": LOGGER_TRACE,
}

# `$field` placeholders accepted in stream_handler_format
log_format_mapper = {
    f"${field}": f"%({field}){kind}"
    for field, kind in (
        ("name", "s"),
        ("levelno", "s"),
        ("levelname", "s"),
        ("module", "s"),
        ("lineno", "d"),
        ("funcName", "s"),
        ("asctime", "s"),
        ("thread", "d"),
        ("process", "d"),
        ("message", "s"),
    )
}


def _get_level(option: str) -> int:
    level_name = parser.get("Logging", option).lower()
    if level_name not in log_level_mapper:
        raise ValueError(
            f"Setting.ini contains invalid value for {option} ({level_name})"
        )
    return log_level_mapper[level_name]


LOGGER_NAME = parser.get("Logging", "logger_name")

MAIN_LOGGER_LEVEL = _get_level("logger_level")
STREAM_HANDLER_LEVEL = _get_level("stream_handler_level")

# ports are unsigned 16-bit integers, the setting may only narrow the range
MAX_PORT = parser.getint("Uri", "max_port")
if not 0 < MAX_PORT <= 0xFFFF:
    raise ValueError(f"Setting.ini contains invalid value for max_port ({MAX_PORT})")

FORMAT = parser.get("Logging", "stream_handler_format")

for key, value in log_format_mapper.items():
    FORMAT = FORMAT.replace(key, value)


def _trace(message, *args, **kwargs):
    self = logging.getLogger(LOGGER_NAME)

    if self.isEnabledFor(LOGGER_TRACE):
        self._log(LOGGER_TRACE, message, args, **kwargs)


main_logger = logging.getLogger(LOGGER_NAME)
main_logger.trace = _trace  # type: ignore
main_logger.propagate = False
main_logger.setLevel(MAIN_LOGGER_LEVEL)

handler = logging.StreamHandler()
handler.setLevel(STREAM_HANDLER_LEVEL)

formatter = logging.Formatter(FORMAT)

handler.setFormatter(formatter)
main_logger.addHandler(handler)
