"""Window and render settings, and the command-line parser that fills them."""

import enum
import os
import re
import shlex
import subprocess
from dataclasses import dataclass, field

from .color import ColorARGB, map_xrgb32
from .debuglog import DebugLog
from .vector import Vector2, Vector3

LOG_CHANNEL = "Config"
LAUNCHER_COMMAND = "Launcher.exe"

LAUNCHER_ARG_SHORT, LAUNCHER_ARG_LONG = "/l", "/Launcher"
SIZE_ARG_SHORT, SIZE_ARG_LONG = "/s", "/Size"
WINDOW_TYPE_FULLSCREEN_ARG_SHORT, WINDOW_TYPE_FULLSCREEN_ARG_LONG = "/wtf", "/WindowTypeFullscreen"
WINDOW_TYPE_BORDERLESS_ARG_SHORT, WINDOW_TYPE_BORDERLESS_ARG_LONG = "/wtb", "/WindowTypeBorderless"
WINDOW_TYPE_WINDOWED_ARG_SHORT, WINDOW_TYPE_WINDOWED_ARG_LONG = "/wtw", "/WindowTypeWindowed"
TARGET_FPS_ARG_SHORT, TARGET_FPS_ARG_LONG = "/tfps", "/TargetFPS"
FIXED_FPS_ARG_SHORT, FIXED_FPS_ARG_LONG = "/ffps", "/FixedFPS"
MAX_MIP_MAPS_ARG_SHORT, MAX_MIP_MAPS_ARG_LONG = "/mmm", "/MaxMipMaps"
LIMIT_FPS_ARG_SHORT, LIMIT_FPS_ARG_LONG = "/lfps", "/LimitFPS"
BACKFACE_REMOVAL_ARG_SHORT, BACKFACE_REMOVAL_ARG_LONG = "/bfr", "/BackfaceRemoval"

DEFAULT_COLOR_CORRECTION = (1.0, 1.0, 1.0)
DEFAULT_DEBUG_TEXT_COLOR = map_xrgb32(0xDD, 0xCC, 0xDD)


class WindowFlags(enum.IntFlag):
    """How the window is shown."""

    NONE = 0
    FULLSCREEN = 1
    BORDERLESS = 2
    WINDOWED = 4


_WINDOW_TYPES = WindowFlags.FULLSCREEN | WindowFlags.BORDERLESS | WindowFlags.WINDOWED


@dataclass
class WindowSpecification:
    """Requested and actual window properties."""

    name: str = "Volition"
    desired_size: Vector2 = field(default_factory=lambda: Vector2(640, 480))
    size: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    flags: WindowFlags = WindowFlags.WINDOWED


@dataclass
class RenderSpecification:
    """Rendering options set by the user, plus values the renderer fills in."""

    limit_fps: bool = False
    render_solid: bool = True
    backface_removal: bool = True
    post_processing: bool = True
    render_ui: bool = True

    render_scale: float = 1.0
    target_fps: int = 60
    target_fixed_fps: int = 60
    max_mip_maps: int = 8

    post_process_color_correction: Vector3 = field(
        default_factory=lambda: Vector3(*DEFAULT_COLOR_CORRECTION)
    )
    debug_text_position: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    debug_text_color: ColorARGB = field(
        default_factory=lambda: ColorARGB(DEFAULT_DEBUG_TEXT_COLOR)
    )

    bits_per_pixel: int = 32
    bytes_per_pixel: int = 4
    min_clip: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    max_clip: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    min_clip_float: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    max_clip_float: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text):
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def open_process(command):
    """Start a program without waiting for it; return the process or None on failure."""
    if isinstance(command, str) and os.name != "nt":
        args = shlex.split(command)
    else:
        args = command
    try:
        return subprocess.Popen(args)
    except (OSError, ValueError):
        return None


def _launcher(config):
    config.executed_with_launcher = True


def _size(config, width, height):
    config.window_spec.desired_size = Vector2(_atoi(width), _atoi(height))


def _window_type(flag):
    def handler(config):
        flags = WindowFlags(config.window_spec.flags) & ~_WINDOW_TYPES
        config.window_spec.flags = flags | flag

    return handler


def _target_fps(config, value):
    config.render_spec.target_fps = _atoi(value)


def _fixed_fps(config, value):
    config.render_spec.target_fixed_fps = _atoi(value)


def _max_mip_maps(config, value):
    config.render_spec.max_mip_maps = _atoi(value)


def _limit_fps(config, value):
    config.render_spec.limit_fps = bool(_atoi(value))


def _backface_removal(config, value):
    config.render_spec.backface_removal = bool(_atoi(value))


# Each handler takes exactly as many parameters as it requires.
_HANDLERS = {
    LAUNCHER_ARG_SHORT: (_launcher, 0),
    LAUNCHER_ARG_LONG: (_launcher, 0),
    SIZE_ARG_SHORT: (_size, 2),
    SIZE_ARG_LONG: (_size, 2),
    WINDOW_TYPE_FULLSCREEN_ARG_SHORT: (_window_type(WindowFlags.FULLSCREEN), 0),
    WINDOW_TYPE_FULLSCREEN_ARG_LONG: (_window_type(WindowFlags.FULLSCREEN), 0),
    WINDOW_TYPE_BORDERLESS_ARG_SHORT: (_window_type(WindowFlags.BORDERLESS), 0),
    WINDOW_TYPE_BORDERLESS_ARG_LONG: (_window_type(WindowFlags.BORDERLESS), 0),
    WINDOW_TYPE_WINDOWED_ARG_SHORT: (_window_type(WindowFlags.WINDOWED), 0),
    WINDOW_TYPE_WINDOWED_ARG_LONG: (_window_type(WindowFlags.WINDOWED), 0),
    TARGET_FPS_ARG_SHORT: (_target_fps, 1),
    TARGET_FPS_ARG_LONG: (_target_fps, 1),
    FIXED_FPS_ARG_SHORT: (_fixed_fps, 1),
    FIXED_FPS_ARG_LONG: (_fixed_fps, 1),
    MAX_MIP_MAPS_ARG_SHORT: (_max_mip_maps, 1),
    MAX_MIP_MAPS_ARG_LONG: (_max_mip_maps, 1),
    LIMIT_FPS_ARG_SHORT: (_limit_fps, 1),
    LIMIT_FPS_ARG_LONG: (_limit_fps, 1),
    BACKFACE_REMOVAL_ARG_SHORT: (_backface_removal, 1),
    BACKFACE_REMOVAL_ARG_LONG: (_backface_removal, 1),
}


class Config:
    """Engine configuration built from defaults and command-line arguments."""

    def __init__(self, log=None):
        self.window_spec = WindowSpecification()
        self.render_spec = RenderSpecification()
        self.executed_with_launcher = False
        self._log = log if log is not None else DebugLog()

    def start_up(self, argv):
        """Apply ``/name value...`` options from argv; argv[0] is the program.

        Arguments that do not start with '/' are skipped; unknown options and
        options missing parameters are reported as warnings and skipped.
        """
        argv = list(argv)
        cursor = 1
        while cursor < len(argv):
            arg = argv[cursor]
            self._log.note(LOG_CHANNEL, "Arg %d: %s\n", cursor, arg)

            if not arg.startswith("/"):
                cursor += 1
                continue

            entry = _HANDLERS.get(arg)
            if entry is None:
                self._log.warning(LOG_CHANNEL, "Unknown argument <%s>!\n", arg)
                cursor += 1
                continue

            handler, min_args = entry
            if len(argv) - cursor <= min_args:
                self._log.warning(
                    LOG_CHANNEL,
                    "Too few params for arg <%s>: %d expected!\n",
                    arg,
                    min_args,
                )
                cursor += 1
                continue

            cursor += 1
            handler(self, *argv[cursor : cursor + min_args])
            cursor += min_args

    def shut_down(self):
        """Restart the launcher if the engine was started from it."""
        if self.executed_with_launcher:
            return open_process(LAUNCHER_COMMAND)
        return None