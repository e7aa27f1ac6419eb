# shockmap

Building blocks for a game-controller mapper, in pure Python with no
dependencies: key name parsing, observable and chorded settings, setting value
parsing, virtual Xbox and DualShock 4 report state, mouse helpers and
quaternion maths.

## What is inside

- `shockmap.quat` has the frozen `Quat` and `Vec` types. `Quat` offers
  `angle_axis`, multiplication, `normalized` and `inverse`. `Vec` offers
  addition, subtraction, scaling and division by a number, negation, `length`,
  `normalized`, `dot`, `cross` and `rotated` (also `vec * quat`).
- `shockmap.keycodes` turns binding names such as `"LMOUSE"`, `"F12"`,
  `"PS_CROSS"` or `"R0080"` into virtual key codes with `name_to_key`. It
  returns 0 for unknown names. `KeyCode.parse` builds a `KeyCode`: it maps
  `"SMALL_RUMBLE"` and `"BIG_RUMBLE"` to rumble codes, and it strips the quotes
  from a quoted command. `is_controller_key` tells whether a code is a virtual
  controller button.
- `shockmap.variables` has observable values. `JSMVariable` has an optional
  filter, change listeners (`add_on_change_listener`,
  `remove_on_change_listener`), `reset` to its default and `copy_with_default`.
  `ChordedVariable` keeps a separate variable per chord key (`at_chord`,
  `get_chord`, `chorded_value`), and its `reset` drops every chord.
  `JSMSetting` adds an `id` and marked modeshift removal.
- `shockmap.values` parses and formats setting values: `FloatXY`, `AxisMode`,
  `AxisSignPair`, `FlickSnapMode`, `Color` (`xRRGGBB`, a name from a mapping
  you pass in, or `R G B`) and `AdaptiveTriggerSetting`. Bad input raises
  `ValueError`.
- `shockmap.gamepad` holds virtual pad state. `XboxReport` and `Ds4Report`
  take button presses, stick and trigger input, and, for DS4, gyro and touchpad
  fingers. `flush()` returns the finished report and clears the analog state,
  keeping held buttons. `DpadHat` combines d-pad presses into a hat direction.
  `encode_touch_point` packs a touch position into the three-byte DS4 form.
- `shockmap.inputs` has `mouse_speed_multiplier` for pointer speed settings 1
  to 20, `MouseAccumulator` for sub-pixel mouse motion, `is_numlock_key`,
  `is_extended_key` and `normalized_to_absolute`.
- `shockmap.whitelist` has string helpers for the local whitelisting service:
  `parse_url`, `header_length`, `strip_header` and `whitelist_path`.

## Example

```python
from shockmap.keycodes import KeyCode, name_to_key
from shockmap.values import FloatXY
from shockmap.variables import JSMVariable

assert name_to_key("SPACE") == 0x20
print(KeyCode.parse("BIG_RUMBLE"))  # RFF00

sens = JSMVariable(FloatXY.parse("1.5"))
sens.add_on_change_listener(lambda v: print("now", v))
sens.set(FloatXY.parse("2 3"))      # now 2 3
```

## What it does not do

The package only computes state and values. It does not read physical
controllers, and it sends no keyboard or mouse input to the system. It does not
create virtual pads on a bus or talk over the network to the whitelisting
service. It does not load configuration files, and it has no command-line
program or tray icon. Those parts belong to the application that uses it.

## Running the tests

```
pip install -e .[test]
pytest
```