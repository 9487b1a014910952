# bootkick

This is the model behind a conveyor-belt logic puzzle. Products ride a
conveyor past a sensor. The player wires the sensor's output pins through
logic to a mascot's input pin. When that pin rises to one, the mascot
kicks the product in front of his boot off the belt. Each kick scores
against the level's rules while a countdown timer runs.

The package holds the game state and its rules. It has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `bootkick.score`: `Score` holds the level and game totals. It also
  holds `good_score` and `bad_score`, the amounts a correct kick and a
  wrong kick add to the level score. Its methods are `add_level_score`,
  `add_good`, `add_bad`, `reset_level` and `reset_game`.
- `bootkick.timer`: `Timer` counts `remaining_time` down one whole second
  at a time. It starts at 120 seconds unless told otherwise and stops at
  zero. `reset` returns it to `start_time`.
- `bootkick.pins`:
  - `State` is the level on a wire: `ZERO`, `ONE` or `UNKNOWN`.
  - `Draggable` is the interface for things that can be grabbed.
  - `OutputPin` pushes its state to the inputs connected to it through
    `connect`, `disconnect` and `update`. It can be hit-tested. Dragging
    it with `set_location` and then calling `release` passes the wire's
    end point to an `on_release` callback.
- `bootkick.flipflop`: `SrFlipFlopGate` has inputs S (`input_a`) and
  R (`input_b`) and outputs Q (`output_a`) and Q' (`output_b`).
  - Q starts at zero and Q' at one.
  - S high sets the gate and R high resets it.
  - Both high makes both outputs unknown. Both low leaves the outputs as
    they are.
- `bootkick.product`: `Product` carries `Property` values, each of which
  has a `PropertyType`: color, shape or content.
  - `load_attributes` reads `kick`, `shape`, `color` and `content` from a
    mapping of level attributes.
  - `kick` sends the product left at the given speed. If a `Score` is
    attached, the kick is scored good or bad.
  - `reset` puts the product back at its initial position.
  - `reset_products`, `move_products` and `place_products` act on many
    products at once.
- `bootkick.sensor`: `Sensor.load` reads a `<sensor>` element and builds
  one `SensorPanel` for each child tag. `Sensor.update` finds the products
  inside the viewing window and sets each panel's output pin to one if its
  property was seen and to zero if it was not.
- `bootkick.sparty`: `Sparty.load` reads a `<sparty>` element: position,
  `height`, `kick-duration`, `kick-speed` and `pin`.
  - `update` starts a kick when the input pin rises to one, then swings
    the boot.
  - Once the boot is far enough out, the thing returned by the `find_at`
    callback at the boot's position is kicked.
- `bootkick.scoreboard`: `Scoreboard.load` reads a `<scoreboard>` element:
  position, the `good` and `bad` amounts (set on its `Score`) and the
  instruction text, in which `<br/>` marks a line break.
  - `update` copies the timer into hours, minutes and seconds.
  - `time_text` gives them as `HH:MM:SS`.
  - `timer_warning` gives the timer color. It is green, turns amber under
    a minute and turns red under thirty seconds.
  - `instruction_lines` splits the goal text into lines.

## Example

```python
from bootkick.flipflop import SrFlipFlopGate
from bootkick.pins import State

gate = SrFlipFlopGate()
gate.set_location(600, 400)
gate.input_a.state = State.ONE   # S
gate.input_b.state = State.ZERO  # R
gate.update(0.1)
assert gate.output_a.state is State.ONE
assert gate.output_b.state is State.ZERO
```

## What it does not do

- It draws nothing and opens no window. The color and image values it
  exposes are there for a front end to use.
- It has no conveyor, no game loop and no loader for whole level files.
  The calling code creates the objects, loads each one from its own XML
  element and calls their `update` methods.
- The only gate it provides is the SR flip-flop.