# fractview

An interactive viewer for the Mandelbrot set and Julia sets. It opens an
800×800 window with pygame, renders the chosen fractal and lets you zoom
in and out around the mouse pointer with the scroll wheel.

## Installation

```
pip install .
```

## Usage

Show the Mandelbrot set:

```
fractview mandelbrot
```

Show a Julia set for a given constant `c = real + imaginary·i`:

```
fractview julia -0.8 0.156
```

Without a constant, the Julia set uses the default `c = -0.2842 - 0.70176i`:

```
fractview julia
```

The fractal name is not case-sensitive. Both parts of the Julia constant
must be decimal numbers (an optional sign, digits and at most one decimal
point, no exponent) strictly between -2 and 2. `mandelbrot` takes no
further arguments, and `julia` takes either none or exactly two. Any other
input prints a usage message to standard error and exits with status 1.

When the window opens, a summary of the controls is printed to standard
output.

## Controls

| Action          | Input                          |
|-----------------|--------------------------------|
| Zoom in / out   | Scroll the mouse wheel up/down |
| Quit            | Press ESC or close the window  |

Each scroll step multiplies or divides the zoom by 1.3, keeping the point
under the pointer fixed. Zooming in stops once the zoom has reached 100000,
and zooming out stops once it has reached 0.0001.

## Colouring

Points that stay bounded for all 50 iterations are drawn black. The other
points get a green shade, `(iterations * 30) % 256`, depending on how
quickly they escaped.

## Using it as a library

The pieces behind the viewer can be used on their own:

- `fractview.view.View` maps pixels to points of the complex plane
  (`to_complex(x, y)`) and zooms around a pixel (`zoom_at(x, y, direction)`).
- `fractview.fractal` has `mandelbrot(c, max_iter)` and
  `julia(z, c, max_iter)`, which return escape-time iteration counts,
  `escape_time(...)` for a single pixel, and
  `render(fractal_set, view, max_iter, julia_c)`, which returns rows of
  packed RGBA colours from top to bottom. `FractalSet` names the two sets.
- `fractview.color` packs colours with `create_color(r, g, b)` and colours
  iteration counts with `pixel_color(iterations, max_iter)`.
- `fractview.app.Viewer` holds the viewer state; `run()` opens the window.
- `fractview.cli.parse_arguments(args)` turns command-line arguments into a
  `Config`, raising `UsageError` for invalid input.

```python
from fractview.fractal import FractalSet, render
from fractview.view import View

rows = render(FractalSet.MANDELBROT, View(width=80, height=80, scale=20), 50)
```

Rendering is done in pure Python, so full-size frames take a while.

The package also carries small helper modules used by the viewer and
available to callers: `chars` (ASCII classification), `numparse` (lenient
number parsing), `strings`, `memory` (byte buffers), `linkedlist`,
`output` and `printf` (a minimal printf-style formatter).

## What it does not do

There is no keyboard panning, no colour-scheme choice, no way to change the
iteration count from the command line and no image export; the window is
the only output.

## Running the tests

```
pip install ".[test]"
pytest
```