"""Application settings, their enumerations and default values."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import IntEnum

APP_NAME = "XDR-GTK"
APP_VERSION = "1.2"
APP_ICON = "xdr-gtk"

PRESETS = 12
ANT_COUNT = 4
HOST_HISTORY_LEN = 5

DEFAULT_PRESETS = (
    87600,
    89400,
    91300,
    93100,
    95000,
    96800,
    98600,
    100500,
    102400,
    104200,
    106100,
    107900,
)

DEFAULT_ANTENNA_NAMES = ("Ant A", "Ant B", "Ant C", "Ant D")


class Action(IntEnum):
    """What to do when a tuner event happens."""

    NONE = 0
    ACTIVATE = 1
    SCREENSHOT = 2


class SignalUnit(IntEnum):
    """Unit used to display the signal level."""

    DBF = 0
    DBM = 1
    DBUV = 2


class SignalDisplay(IntEnum):
    """Kind of signal level display."""

    NONE = 0
    GRAPH = 1
    BAR = 2


class SignalMode(IntEnum):
    """Behaviour of the signal graph on retune."""

    DEFAULT = 0
    RESET = 1


class RdsMode(IntEnum):
    """Programme type table in use."""

    RDS = 0
    RBDS = 1


class RdsErrCorrection(IntEnum):
    """Accepted level of RDS error correction."""

    NO = 0
    SMALL = 1
    LARGE = 2


def _default_serial() -> str:
    return "COM3" if sys.platform.startswith("win") else "ttyUSB0"


@dataclass
class Settings:
    """All user settings, initialised to the application defaults."""

    # Window
    win_x: int = -1
    win_y: int = -1

    # Connection
    network: bool = False
    serial: str = field(default_factory=_default_serial)
    host: list[str] = field(default_factory=lambda: ["localhost"])
    port: int = 7373
    password: str = ""

    # Tuner settings
    volume: int = 100
    rfgain: bool = False
    ifgain: bool = False
    agc: int = 2
    deemphasis: int = 0

    # Interface
    initial_freq: int = 87500
    freq_offset: int = 0
    utc: bool = True
    auto_connect: bool = False
    fm_10k_steps: bool = False
    mw_10k_steps: bool = False
    disconnect_confirm: bool = False
    auto_reconnect: bool = False
    event_action: Action = Action.NONE
    hide_decorations: bool = False
    hide_interference: bool = False
    hide_radiotext: bool = False
    hide_statusbar: bool = False
    restore_position: bool = True
    grab_focus: bool = False
    title_tuner_info: bool = False
    title_tuner_mode: int = 0
    accessibility: bool = False
    horizontal_af: bool = False
    rotator_arrows: bool = False
    dark_theme: bool = True
    screen_clipboard: bool = True
    extended_frequency: bool = False
    tef668x_mode: bool = False

    # Signal
    signal_offset: float = 0.0
    signal_unit: SignalUnit = SignalUnit.DBF
    signal_display: SignalDisplay = SignalDisplay.GRAPH
    signal_mode: SignalMode = SignalMode.DEFAULT
    signal_height: int = 110
    signal_scroll: bool = True
    signal_grid: bool = True
    signal_avg: bool = False
    color_mono: str = "#B5B5FF"
    color_stereo: str = "#8080FF"
    color_rds: str = "#3333FF"
    color_mono_dark: str = "#006600"
    color_stereo_dark: str = "#35A128"
    color_rds_dark: str = "#8FF0A4"

    # RDS
    rds_pty_set: RdsMode = RdsMode.RDS
    rds_reset: bool = False
    rds_reset_timeout: int = 60
    rds_extended_check: bool = False
    rds_ps_info_error: RdsErrCorrection = RdsErrCorrection.LARGE
    rds_ps_data_error: RdsErrCorrection = RdsErrCorrection.SMALL
    rds_ps_progressive: bool = False
    rds_ps_prog_override: bool = True
    rds_rt_info_error: RdsErrCorrection = RdsErrCorrection.NO
    rds_rt_data_error: RdsErrCorrection = RdsErrCorrection.NO
    rds_rt_progressive: bool = True
    rds_rt_prog_override: bool = True

    # Antenna
    ant_show_alignment: bool = False
    ant_swap_rotator: bool = False
    ant_count: int = ANT_COUNT
    ant_clear_rds: bool = True
    ant_auto_switch: bool = False
    ant_start: list[int] = field(default_factory=lambda: [0] * ANT_COUNT)
    ant_stop: list[int] = field(default_factory=lambda: [0] * ANT_COUNT)
    ant_offset: list[int] = field(default_factory=lambda: [0] * ANT_COUNT)
    ant_name: list[str] = field(default_factory=lambda: list(DEFAULT_ANTENNA_NAMES))

    # Logs
    rdsspy_port: int = 7376
    rdsspy_auto: bool = False
    rdsspy_run: bool = False
    rdsspy_exec: str = ""
    srcp: bool = False
    srcp_port: int = 9031
    rds_logging: bool = False
    replace_spaces: bool = True
    log_dir: str = ""
    screen_dir: str = ""

    # Keyboard (key names)
    key_tune_up: str = "Right"
    key_tune_down: str = "Left"
    key_tune_fine_up: str = "Up"
    key_tune_fine_down: str = "Down"
    key_tune_jump_up: str = "Page_Up"
    key_tune_jump_down: str = "Page_Down"
    key_tune_back: str = "B"
    key_tune_reset: str = "R"
    key_screenshot: str = "S"
    key_bw_up: str = "bracketright"
    key_bw_down: str = "bracketleft"
    key_bw_auto: str = "backslash"
    key_rotate_cw: str = "Home"
    key_rotate_ccw: str = "End"
    key_switch_antenna: str = "Delete"
    key_rds_ps_mode: str = "grave"
    key_scan_toggle: str = "Q"
    key_scan_prev: str = "less"
    key_scan_next: str = "greater"
    key_stereo_toggle: str = "M"
    key_mode_toggle: str = "F"

    # Presets
    presets: list[int] = field(default_factory=lambda: list(DEFAULT_PRESETS))

    # Scheduler
    scheduler_freqs: list[int] = field(default_factory=list)
    scheduler_timeouts: list[int] = field(default_factory=list)
    scheduler_default_timeout: int = 30

    # Spectral scan
    scan_x: int = -1
    scan_y: int = -1
    scan_width: int = 950
    scan_height: int = 150
    scan_start: int = 87500
    scan_end: int = 108000
    scan_step: int = 100
    scan_bw: int = 12
    scan_continuous: bool = False
    scan_relative: bool = False
    scan_peakhold: bool = True
    scan_mark_tuned: bool = True
    scan_update: bool = True
    scan_marks: list[int] = field(default_factory=list)