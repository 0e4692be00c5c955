# prodline

A small domain model for an automated production line. It needs nothing beyond the
standard library.

## Modules

- `prodline.elements` covers the line's hardware elements: `RoboticArm`,
  `HydraulicCylinder`, `ForceSensor` and `VisionSensor`. They are built on the abstract
  bases `Element`, `Actuator` and `Sensor`. Each element can be activated and
  deactivated, which changes its `status`. Each can also give a configuration report
  with `report_configuration()`. Actions such as `extend`, `retract`, `position_at`,
  `calibrate` or `stop` print a console message. Several of them also return that
  message.
- `prodline.records` holds dataclass records: `Machine`, `Operator` and `Package`. It
  also has `SupervisionConsole`, `AssemblySequence` and `TraceabilitySystem`. Their
  actions update their state and print a message, for example `AssemblySequence.start()`
  sets `status` to `"En Progreso"`.
- `prodline.performance` models machine performance as a sigmoid curve,
  `y = 100 / (1 + exp(-k (x - x0)))`. It provides `SigmoidPerformance`, which holds a
  list of `PerformancePoint` samples.
- `prodline.operators` provides `OperatorRepository`. It keeps operators in a
  semicolon-separated text file (`operador.txt` by default).
- `prodline.export` turns a performance model into CSV or plain-text reports. It also
  parses and validates input, raising `ValidationError` when the input is bad.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Performance curves

```python
from prodline.performance import SigmoidPerformance

model = SigmoidPerformance(k=0.1, x0=50.0)
model.generate_points_by_step(0, 100, 1.0)   # a step <= 0 is taken as 1
print(len(model))                  # 101
print(model.inflection_point())    # (x: 50.00, y: 50.00%)
print(model.summary())
high = model.points_above(80.0)
```

`generate_points(x_start, x_end, count)` samples `count` evenly spaced points. It
always produces at least two. `max_performance()` and `min_performance()` return
`0.0` when no points have been sampled.

## Reports and validation

```python
from prodline.export import (
    classify_performance, export_csv, export_text, parse_double,
    save_file, validate_sigmoid_parameters,
)

k = parse_double("0.1")
x0 = parse_double("50.0")
validate_sigmoid_parameters(k, x0)      # raises ValidationError unless both > 0

csv_text = export_csv(model, "Press 1", k, x0)
save_file(csv_text, "rendimiento.csv")  # written as UTF-8 with a byte-order mark

classify_performance(65.0)              # "Alto"
```

Performance values are put into bands: "Muy Bajo" below 20, "Bajo" below 40, "Moderado"
below 60, "Alto" below 80, and "Muy Alto" otherwise.

`validate_not_blank(text, field_name)` rejects empty or whitespace-only text.
`format_double(value, decimals)` gives fixed-point text.

## Operators

```python
from prodline.operators import OperatorRepository
from prodline.records import Operator

repo = OperatorRepository("operador.txt")   # created empty if missing
repo.add(Operator(1, "Ana", "Supervisor", "Morning", "Line A"))  # False if id taken
repo.search(0, "An")          # an id of 0 and an empty name match any operator
repo.modify(1, "Ana", "Lead", "Night", "Line B")
repo.remove(1)
repo.close()                  # further use raises RuntimeError
```

Each change is written straight back to the file. A line with fewer than five fields
raises `ValueError` when the file is loaded.

## What it does not do

- There is no command-line program and no graphical interface. The package does not
  draw charts of the curves. It offers no dialogs and no log-in screen.
- Only operators are stored. Machines and packages exist as records (`Machine`,
  `Package`), but the package has no store for them and cannot look them up.
- Element and console actions simulate their effect by changing fields and printing
  messages. They do not talk to any device.