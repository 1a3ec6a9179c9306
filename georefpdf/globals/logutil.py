"""
georefpdf/globals/logutil.py

Console logging helpers shared by the library and the CLI.

Messages are printed with a colored ``[LEVEL]`` prefix. While a :class:`Logger`
is active, everything written to stdout/stderr is also mirrored, timestamped and
stripped of ANSI codes, into a log file.
"""
import re
import sys
import os
from pathlib import Path
from datetime import datetime

from georefpdf.globals import configs, directories

################################################################################################
ANSI_ESCAPE = re.compile(r'\x1B[@-_][0-?]*[ -/]*[@-~]')
TIMESTAMP_PREFIX = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\]")
RESET = '\x1b[0m'
BOLD = "\033[1m"

LEVEL_COLORS = {
    "PROCESS": (171, 52, 235),
    "INFO": (0, 255, 255),
    "WARNING": (255, 255, 0),
    "ERROR": (255, 0, 0),
    "SUCCESS": (0, 255, 0),
    "SETTING": (250, 197, 97),
}

def _enable_windows_ansi():
    if os.name != "nt":
        return
    try:
        import ctypes
        kernel32 = ctypes.windll.kernel32
        h = kernel32.GetStdHandle(-11)  # STD_OUTPUT_HANDLE
        mode = ctypes.c_uint32()
        if kernel32.GetConsoleMode(h, ctypes.byref(mode)):
            kernel32.SetConsoleMode(h, mode.value | 0x0004)  # ENABLE_VIRTUAL_TERMINAL_PROCESSING
    except (AttributeError, OSError):
        # plain text still works
        pass

_enable_windows_ansi()


def default_log_path(log_dir: Path | None = None) -> Path:
    """Timestamped log file under ``log_dir`` (or the project logs dir)."""
    base = Path(log_dir) if log_dir else directories.LOGS_DIR
    return base / f"{configs.LOG_FILE_PREFIX}_{datetime.now():%Y%m%d_%H%M%S}.log"


class Logger:
    """Tee stdout/stderr into a log file until :meth:`close` is called."""
    _instance = None

    def __init__(self, logfile_path=None):
        self.logfile_path = Path(logfile_path) if logfile_path else default_log_path()
        self.logfile_path.parent.mkdir(parents=True, exist_ok=True)

        self._prev_stdout = sys.stdout
        self._prev_stderr = sys.stderr

        self.logfile = open(self.logfile_path, "a", encoding="utf-8", buffering=1)  # line-buffered
        sys.stdout = self
        sys.stderr = self
        Logger._instance = self

    def __enter__(self): return self
    def __exit__(self, exc_type, exc, tb): self.close()

    def write(self, message):
        if message is None:
            return
        if isinstance(message, (bytes, bytearray)):
            message = message.decode("utf-8", errors="replace")
        elif not isinstance(message, str):
            message = str(message)

        for part in message.splitlines(keepends=True):
            if part.strip() and not TIMESTAMP_PREFIX.match(part):
                part = f"[{datetime.now():%Y-%m-%d %H:%M:%S}] {part}"

            self._prev_stdout.write(part)
            if not self.logfile.closed:
                self.logfile.write(ANSI_ESCAPE.sub("", part))

    def flush(self):
        self._prev_stdout.flush()
        if not self.logfile.closed:
            self.logfile.flush()

    def close(self):
        if sys.stdout is self:
            sys.stdout = self._prev_stdout
        if sys.stderr is self:
            sys.stderr = self._prev_stderr
        self.logfile.close()
        if Logger._instance is self:
            Logger._instance = None

    @classmethod
    def teardown(cls):
        if cls._instance:
            cls._instance.close()

def rgb_prefix(r: int, g: int, b: int) -> str:
    """Start an RGB color (leave it open)."""
    return f"\033[38;2;{r};{g};{b}m"

def _log(level, msg):
    r, g, b = LEVEL_COLORS[level]
    prefix = f"{rgb_prefix(r, g, b)}{BOLD}[{level}]{RESET} "
    print(prefix + str(msg))

def process_step(msg):  _log("PROCESS", msg)
def info(msg): _log("INFO", msg)
def warn(msg): _log("WARNING", msg)
def error(msg): _log("ERROR", msg)
def success(msg): _log("SUCCESS", msg)
def setting_config(msg): _log("SETTING", msg)
