# xdrgtk

Building blocks for an FM/AM tuner front-end, with no user interface.
The package needs only the standard library.

## Modules

### `xdrgtk.settings`

`Settings` is a dataclass that holds every user setting, and each field
starts at the application default. The fields cover the window, the
connection, the tuner, the interface, the signal display, RDS, antennas,
logs, keyboard keys, presets, the scheduler and the spectral scan. Some
values are stored in simple forms:

- Keys are stored as key names such as `"Right"` or `"Page_Up"`.
- Colours are stored as hex strings such as `"#8080FF"`.

The enumerations are `Action`, `SignalUnit`, `SignalDisplay`, `SignalMode`,
`RdsMode` and `RdsErrCorrection`. The module also defines these constants:
`APP_NAME`, `APP_VERSION`, `PRESETS`, `ANT_COUNT`, `DEFAULT_PRESETS` and
`DEFAULT_ANTENNA_NAMES`.

### `xdrgtk.rdslog`

`RdsLogger(directory, frequency, utc, replace_spaces, enabled)` writes
received RDS data to a text log.

- **When the file is created:** on the first event, as
  `<directory>/<YYYY-MM-DD>/<frequency>-<HHMMSS>.txt`. With `utc` set, the
  time ends in `Z`.
- **Default directory:** `./logs`, used when `directory` is empty.
- **Line format:** each line is a timestamp, a tab, a tag and the value.
- **Methods:** `log_pi`, `log_af`, `log_ps`, `log_rt`, `log_pty`, `log_ecc`
  and `log_ct`.
- **Repeated values:** a PS or radiotext that repeats the last one written
  is skipped.
- **When disabled:** a logger with `enabled` false writes nothing.
- **Closing:** the logger is a context manager, and `close()` closes the
  file.

`replace_spaces(text)` turns spaces into underscores.

### `xdrgtk.rdsspy`

`RdsSpyServer(port)` is a TCP server that sends RDS groups to one connected
client at a time, in the RDS Spy text format.

- **Starting:** `start()` binds the port and accepts clients on a background
  thread. If the port cannot be bound, it raises `RdsSpyError`.
- **Sending:** `send(blocks, errors)` and `reset()` send to the connected
  client, and do nothing when no client is connected.
- **Status:** `is_up()` and `is_connected()` report the server state.
  `address` gives the bound port.
- **Stopping:** `stop()` shuts the server down.

`format_group(blocks, errors)` and `format_reset()` build the messages.

### `xdrgtk.scheduler`

`Scheduler(tune, entries)` steps through a list of
`SchedulerEntry(freq, timeout)`. It calls `tune(freq)` for each entry, then
waits that entry's timeout in seconds on a timer before moving on, and wraps
around at the end of the list.

- `start()` begins the cycle. It raises `SchedulerError` when the list is
  empty.
- `stop()` ends the cycle.
- `toggle()` starts or stops the cycle and returns whether it now runs.
- `is_running()` reports the state.

### `xdrgtk.antpatt`

`AntennaPattern(stream)` writes the line protocol of an antenna-pattern
recorder to a text stream that you provide:

- `start(freq)` writes `START` and `FREQ <kHz>`.
- `push(level)` writes `PUSH <level>`, but only while a measurement is
  active.
- `stop()` writes `STOP`.
- `toggle(freq)` starts or stops a measurement.

Set `stream` to `None` when the other end goes away, and every command is
then ignored.

### `xdrgtk.scan`

- **Scan data:** `ScanData` is a list of `ScanPoint(freq, signal)` together
  with its min and max levels.
- **Marks:** `ScanMarks` is a sorted set of marked frequencies. It has
  `add`, `toggle`, `remove`, `clear` and `clear_range`.
- **Checking a range:** `validate_range(start, stop, step)` puts the range
  in order. It raises `ScanError` when the sample count is below 2 or above
  700.
- **Scan command:** `build_scan_command(...)` builds the tuner command that
  starts a scan.

### `xdrgtk.scan_state`

`ScanState` keeps the current scan, a peak-hold scan, a held scan and the
frequency marks.

- **Updates:** `update` and `update_value` bring in new results, and keep
  the peak up to date.
- **Hold:** `toggle_hold` holds a copy of the current scan or drops it.
- **Clearing:** `clear` forgets the current, peak and held scans.
- **Marks in view:** `visible_marks`, `prev_mark` and `next_mark` work on
  the marks that fall within the current scan. `prev_mark` and `next_mark`
  wrap around.
- **Adding and removing marks:** `add_marks(step)` marks every multiple of
  `step`. `clear_marks(all_marks)` removes marks.
- **Scheduler:** `scheduler_entries(timeout)` turns the visible marks into
  `SchedulerEntry` items.

### `xdrgtk.scan_plot`

Plot geometry, with no drawing:

- `level_range` gives the level range of the plot.
- `scale_ticks` gives the ticks of the level scale, as `ScaleTick` items.
- `spectrum_path` gives the spectrum outline as Bezier curves, as a
  `SpectrumPath`.
- `focus_index` gives the sample under the pointer.
- `mark_position` gives the canvas position of a frequency mark.
- `map_value` maps a value linearly from one range to another.
- `format_frequency` formats a frequency, so that 87500 becomes `"87.5"`.

## Example

```python
from xdrgtk.scan import build_scan_command, validate_range
from xdrgtk.scan_plot import format_frequency

start, stop = validate_range(87500, 108000, 100)
command = build_scan_command(start, stop, 100, antenna=0, offset=0,
                             filter_id=-1, bandwidth=0, continuous=False,
                             tef668x_mode=False)
print(format_frequency(87500))  # "87.5"
```

## What it does not do

- There is no window, no command-line program, and no connection to a
  tuner.
- `Settings` is not read from or saved to a file.
- The scheduler and the scan work through a tuning callback and data that
  you pass in.
- `AntennaPattern` and `RdsSpyServer` do not start any external program.
  You supply the stream to write to, and the RDS Spy client connects on its
  own.

## Tests

```
pip install .[test]
pytest
```