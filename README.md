# grblkit

Parsers for the text responses of grbl and grblHAL CNC controllers. These
include status report fields, setting descriptions and groups, feedback
messages and `ok` / `error:<code>` replies. It is pure Python and has no
dependencies.

## Installation

```
pip install grblkit
```

## Usage

Each parser takes one response line, or one `|`-separated field of a status
report, and returns a value. It raises `ValueError` when the text cannot be
read. Each module also has `is_...` functions that check only the prefix, or
the prefix and the closing bracket.

```python
from grblkit.axis import Axis
from grblkit.machine_state import MachineStateName, parse_machine_state
from grblkit.position import parse_global_position, parse_scaled_axes
from grblkit.speed import parse_machine_speed

report = "<Hold:0|MPos:3.21,2.0,-1|FS:100,3000,1677|Sc:XZ>"
state_field, pos_field, speed_field, scaled_field = report.strip("<>").split("|")

state = parse_machine_state(state_field)
assert state.status is MachineStateName.HOLD and state.sub_status == 0

position = parse_global_position(pos_field)   # [3.21, 2.0, -1.0]
speed = parse_machine_speed(speed_field)       # MachineSpeed(100, 3000, 1677)
assert parse_scaled_axes(scaled_field) == [Axis.X, Axis.Z]
```

Command replies:

```python
from grblkit.status import parse_response_status

assert parse_response_status("ok").is_ok
assert parse_response_status("error:2").error_code == 2
```

Setting descriptions. Empty text fields become `None`, and `str()` shows them
as `-`:

```python
from grblkit.setting_description import parse_setting_description

desc = parse_setting_description(
    "[SETTING:0|27|Step pulse time|microseconds|6|#0.0|2.0|]"
)
assert desc.description == "Step pulse time" and desc.value_max is None
```

## Modules

- `grblkit.axis`: `Axis`, axis lookup by name or index, axis bit masks
  (`get_axis_mask`, `get_combined_axes_mask`, `get_axes_from_mask`), and the
  `SignalMask` flags.
- `grblkit.accessory`: `A:` field, returns a list of `AccessoryState`.
- `grblkit.machine_signal`: `PN:` field, returns a list of `MachineSignal`.
- `grblkit.buffer`: `Bf:` field, returns `BufferState`.
- `grblkit.overrides`: `Ov:` field, returns `Overrides`.
- `grblkit.homing`: `H:` field, returns `HomingState`. Without an axes mask,
  all axes are reported as homed.
- `grblkit.speed`: `FS:` field, returns `MachineSpeed`.
- `grblkit.machine_state`: state section such as `Idle` or `Hold:0`, returns
  `MachineState`.
- `grblkit.position`: `WPos:`, `MPos:`, `WCO:`, `WCS:` and `Sc:` fields.
- `grblkit.fields`: `FW:`, `Ln:`, `In:`, `D:` (`ArcMode`), `MPG:`
  (`PendantControl`) and `TLR:`.
- `grblkit.gcode_state`: `[GC:...]`, returns `GCodeState`.
- `grblkit.compile_options`: `CompileOption` and `ExtendedCompileOption`
  lookup by code.
- `grblkit.setting_description`: `[SETTING:...]`.
- `grblkit.setting_group`: `[SETTINGGROUP:...]`.
- `grblkit.messages`: `[echo:...]`, `[HLP:...]` and `[MSG:...]`.
- `grblkit.status`: `ok` and `error:<code>`, returns `ResponseStatus`.

## What it does not do

grblkit only parses text you already have. It does not open serial ports,
send commands or keep connections to a controller. It also has no parser for
a whole status report line: split the report into fields yourself, as shown
above.

## Running the tests

```
pip install -e ".[test]"
pytest
```