# minirt

A small ray tracer written in plain Python. It reads a scene from a `.rt`
file and renders spheres and planes lit by an ambient light and any number
of point lights, seen through a single camera. The image is shown in a Tk
window or written to a PPM file.

It has no dependencies outside the standard library. The window needs
`tkinter`.

## Installing

```
pip install .
```

## Running

Open a window showing the scene:

```
minirt scene.rt
```

Render to a binary PPM (`P6`) file instead of opening a window:

```
minirt scene.rt -o scene.ppm
minirt scene.rt --output scene.ppm --size 320x200
```

| Option                | Meaning                                              |
|-----------------------|------------------------------------------------------|
| `-o`, `--output FILE` | write the image to `FILE` as PPM, open no window     |
| `--size WxH`          | image size in pixels (default `1100x700`)            |

Exactly one scene path must be given. While the scene is read, a line
`Register object with id <id>` is printed for every element. On failure an
error message goes to standard error and the exit status tells what went
wrong:

| Status | Cause                                                      |
|--------|------------------------------------------------------------|
| 0      | success                                                    |
| 1      | wrong command line                                         |
| 2      | other error (e.g. no camera, output file not writable, no `tkinter`) |
| 3      | scene file could not be opened                             |
| 7      | a line starts with an unknown identifier                   |
| 8      | an element's values are malformed                          |
| 9      | an element could not be added to the scene                 |

## Scene files

Each non-empty line describes one element. The first word is the element's
identifier and the words after it are its values. Words are separated by
spaces or tabs; vector and colour components are separated by commas.

| Id   | Element  | Values                                          |
|------|----------|-------------------------------------------------|
| `A`  | ambient  | `<level 0.0-1.0> <r,g,b>`                       |
| `C`  | camera   | `<x,y,z> <normal, each -1..1> <fov 0-180>`      |
| `L`  | light    | `<x,y,z> <level 0.0-1.0> <r,g,b>`               |
| `pl` | plane    | `<x,y,z> <normal> <r,g,b>`                      |
| `sp` | sphere   | `<x,y,z> <diameter> <r,g,b>`                    |
| `cy` | cylinder | `<x,y,z> <normal> <diameter> <height> <r,g,b>`  |

Colour components run from 0 to 255; coordinates must lie within the 32-bit
integer range. A later `A` or `C` line replaces an earlier one. Without an
`A` line, black ambient light is used. A camera is required for rendering.

Example:

```
A 0.2 255,255,255
C 0,0,-20 0,0,1 70
L -10,10,-10 0.8 255,255,255
sp 0,0,0 10 255,0,0
pl 0,-5,0 0,1,0 200,200,200
```

## Controls

In the window each key press changes the camera and renders again.

| Key            | Action                           |
|----------------|----------------------------------|
| `w` / `s`      | move forward / backward          |
| `a` / `d`      | move left / right                |
| space / shift  | move up / down                   |
| arrow keys     | turn the camera                  |
| `=` / `-`      | narrow / widen the field of view |
| Esc            | close the window                 |

## Using it from Python

```python
from minirt.cli import load_scene
from minirt.controls import handle_key
from minirt.render import render_scene

scene = load_scene("scene.rt")
pixels = render_scene(scene, 320, 200)   # rows of 0xRRGGBB ints, top row first
handle_key(scene, ord("w"))              # returns the KeyAction applied
```

- `minirt.scene.create_scene()` builds an empty `Scene` with the six element
  types registered; `minirt.parser.parse_map(path, scene)` reads a file into
  it and `parse_lines(content, scene)` reads text.
- Loading errors are subclasses of `minirt.errors.SceneError`
  (`MapNotFoundError`, `UnknownObjectError`, `ObjectFormatError`,
  `RegistrationError`); each carries `message` and `exit_code`.
- `minirt.render.trace(scene, ray)` returns the colour seen along one `Ray`.
- `minirt.objects` holds the element classes and their `parse_*` functions;
  `minirt.vector` holds `Vec3`, `Rgb`, `FloatRgb` and `Ray`.

## What it does not do

- Cylinders are read and kept in the scene but are not drawn.
- There are no shadows: every light reaches every surface facing it, whatever
  lies in between. Seen from inside a sphere, only lights inside it count.
- There are no reflections, refractions or specular highlights, and one ray
  is cast per pixel, so edges are not smoothed.
- Rendering is pure Python and slow at full window size; `--size` helps.