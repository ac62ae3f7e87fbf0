# ipcosd

Building blocks for the on-screen display (OSD) overlays of an IP camera's
video stream: an INI parameter store, BMP image loading, TrueType text
rendering into ARGB8888 buffers, border drawing and the geometry that places
an overlay region inside the video frame.

## Installing

```
pip install .
```

Pillow is the only dependency; it renders text with TrueType fonts.

## Parameters

`ipcosd.param.ParamStore` loads an INI file and gives thread-safe, typed
access to it. Keys are written `section:key` and are case-insensitive. If the
file cannot be loaded, the factory file is copied over it and loading is tried
once more; if that fails too, `ParamError` is raised.

```python
from ipcosd.param import ParamStore

with ParamStore("/userdata/rkipc.ini", "/tmp/rkipc-factory-config.ini") as params:
    width = params.get_int("video.0:width", -1)
    params.set_string("osd.0:display_text", "Front door")
    params.save()
```

`get_int` understands C notation (`42`, `042` octal, `0x42` hex). `dump()`
logs every key and returns them as `(key, value)` pairs, `reload()` reads the
file again, and `close()` (also run on leaving the `with` block) saves and
drops the parameters.

The parser underneath is in `ipcosd.iniparser`:

- `load(path, on_error=None)` and `loads(text, name="<string>", on_error=None)`
  return an `IniFile`; syntax errors are passed to `on_error` (stderr by
  default) and then `IniError` is raised.
- `IniFile` offers `sections()`, `section_keys()`, `get_string()`,
  `get_int()`, `get_double()`, `get_boolean()`, `has_entry()`, `set()`,
  `unset()`, and output through `dump()`, `dump_ini()` and
  `dump_section_ini()`.

Quoted values, `;` and `#` comments, empty values and lines continued with a
trailing `\` are understood. Line-level parsing (`parse_line`,
`read_entries`) lives in `ipcosd.ini_lines`, and the slot-ordered
string store with its 32-bit key hash (`Dictionary`, `dictionary_hash`) in
`ipcosd.dictionary`.

## Overlay regions

`ipcosd.osd_common.OsdData` describes one region: its type, image path or
`TextData`, size, origin and pixel buffer. `allocate_buffer()` gives it a
zeroed buffer of four bytes per pixel. `up_align16()` rounds a value up to a
multiple of 16.

`ipcosd.osd_geometry` maps normalized screen coordinates onto the video:

- `scale_rates(video_w, video_h, normalized_w, normalized_h)`
- `scale_position(value, rate)` scales and aligns up to 16
- `shrink_to_fit(origin, size, limit)` reduces a size in steps of 16
- `shift_to_fit(origin, size, limit)` moves an origin back in steps of 16

### Text

```python
from ipcosd.font_factory import FontFactory
from ipcosd.osd_common import OsdData, TextData
from ipcosd.osd_text import decode_display_text, fill_text, text_box

font_path = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
font = FontFactory(font_path, 32)
text = decode_display_text("Front door")
data = OsdData(text=TextData(text=text, font_size=32, font_color=0xFFFFFF,
                             font_path=font_path))
data.width, data.height = text_box(font, text, 32)
fill_text(data, font)   # data.buffer now holds the rendered label
```

`FontFactory` has `font_size` and `font_color` properties (the colour is
given as `0xAARRGGBB` and drawn opaque), `draw_text(buffer, width, height,
text)`, `text_advance(text)` in 1/64 pixel units, and `close()`.
`decode_display_text` reads bytes as UTF-8 and keeps at most 32 characters.

### Images

`ipcosd.osd_text.fill_image(data)` loads `data.image` into the region. The
BMP code itself is in `ipcosd.bmp_reader`: `load_bmp(path)` returns a
`BmpImage` for 24- or 32-bit files (in a 24-bit file the colour blue 0x08,
green 0, red 0 becomes transparent), `bmp_to_argb8888()` converts raw pixel
rows, and `save_argb8888_to_bmp(buffer, width, height, path)` writes a buffer
back out as a 32-bit BMP. Errors raise `BmpError`.

### Borders

`ipcosd.draw_paint` paints borders into a sequence of 32-bit pixel values
(a `list` or `array.array("I")`): `draw_solid_border`, `draw_dotted_border`,
and `BorderPainter.draw`, which picks by `BorderEffect` and moves the dash
pattern along by 40 pixels on each "waterfall light" call.

## What this package does not do

It does not drive overlays by itself. There is no manager that walks the
`osd.N` sections of the parameter file and creates, changes or destroys
regions in a video pipeline, no background thread that redraws a date/time
stamp, no date/time text formatting and no palette colour lookup. It provides
the pieces; wiring them to a video pipeline is left to the caller. There is no
command-line program.