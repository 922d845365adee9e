"""Channel-tagged debug log that writes coloured console output and a log file."""

import sys

LOG_PATH = "Log.txt"
LOG_CHANNEL = "DebugLog"

MESSAGE_BUFFER_SIZE = 512
TEMP_BUFFER_SIZE = 420

ANSI_NONE = 0
ANSI_FG_GREY = 90
ANSI_BG_RED = 41
ANSI_BG_BLUE = 44


def _format(fmt, args):
    return fmt % args


def format_message(channel, priority, fmt, *args):
    """Build a log line, printf-formatted and truncated like fixed buffers.

    Without a channel the message stands alone; with one it is prefixed
    by ``<channel> priority: ``.
    """
    if not channel:
        return _format(fmt, args)[: MESSAGE_BUFFER_SIZE - 1]
    body = _format(fmt, args)[: TEMP_BUFFER_SIZE - 1]
    return f"<{channel}> {priority}: {body}"[: MESSAGE_BUFFER_SIZE - 1]


def ansi_color(priority):
    """ANSI attribute for a priority: blue for warnings, red for errors."""
    first = priority[:1]
    if first == "W":
        return ANSI_BG_BLUE
    if first == "E":
        return ANSI_BG_RED
    return ANSI_NONE


class DebugLog:
    """Writes messages to a console stream and, once started, to a log file."""

    def __init__(self, console=None):
        self._console = console
        self._file = None

    @property
    def is_open(self):
        """True while the log file is open."""
        return self._file is not None

    def start_up(self, path=LOG_PATH):
        """Open (truncate) the log file and record that logging started."""
        self._file = open(path, "w", encoding="utf-8")
        self.note(LOG_CHANNEL, "DebugLog started\n")

    def shut_down(self):
        """Close the log file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.shut_down()
        return False

    def output(self, channel, priority, fmt, *args):
        """Format, print in colour and append to the file; return the message."""
        message = format_message(channel, priority, fmt, *args)
        console = self._console if self._console is not None else sys.stdout
        console.write(f"\x1b[{ansi_color(priority)}m{message}\x1b[m")
        if self._file is not None:
            self._file.write(message)
            self._file.flush()
        return message

    def note(self, channel, fmt, *args):
        """Log with Note priority."""
        return self.output(channel, "Note", fmt, *args)

    def warning(self, channel, fmt, *args):
        """Log with Warning priority."""
        return self.output(channel, "Warning", fmt, *args)

    def error(self, channel, fmt, *args):
        """Log with Error priority."""
        return self.output(channel, "Error", fmt, *args)

    def log(self, fmt, *args):
        """Log a bare message with no channel or priority."""
        return self.output("", "", fmt, *args)