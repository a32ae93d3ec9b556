# cubscape

cubscape holds the groundwork for a grid-based raycasting game. It is made of
two helper packages:

- `cubscape.libft` has character, memory, string, list, formatting and
  line-reading helpers. They follow NUL-terminated string rules: text ends at
  its first `"\0"`.
- `cubscape.minilibx` has colour conversion, word splitting and off-screen
  32-bit images. The images can be turned into pygame surfaces.

## Installing

```
pip install .
```

pygame is installed with the package. Only `cubscape.minilibx.image` uses it.

## `cubscape.libft`

| Module       | What it offers |
|--------------|----------------|
| `chars`      | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`. Each takes a one-character string or an int code. |
| `memory`     | `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, and `memmove(buffer, dest_start, src_start, n)` for overlapping copies inside one buffer |
| `strings`    | `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `strdup`. Searches return an index or `None`. `strlcpy` and `strlcat` return `(text, length)`. |
| `transform`  | `atoi` (wraps to signed 32 bits), `itoa`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, and `striteri` on a mutable sequence of characters |
| `output`     | `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`. Each writes to a text stream, and writes nothing when the stream is `None`. |
| `printf`     | `format_string(fmt, *args)`, and `printf(fmt, *args, stream=None)`, which returns the number of characters written. Both support `%c %s %p %d %i %u %x %X %%`. Also `to_base` and `base_length`. |
| `lists`      | `Node` and `LinkedList` with `add_front`, `add_back`, `last`, `clear`, `iterate`, `map`, `len()` and iteration, plus `delete_node` |
| `gnl`        | `LineReader(stream, buffer_size=1)` returns one line at a time, newline kept, from a text or binary stream. `read_lines(path)` reads a whole file. |

```python
import io
from cubscape.libft.transform import atoi, split
from cubscape.libft.printf import format_string
from cubscape.libft.gnl import LineReader
from cubscape.libft.lists import LinkedList

atoi("  -42abc")                   # -42
split("  tripouille  42  ", " ")   # ['tripouille', '42']
format_string("%d = %x", 255, 255) # '255 = ff'
list(LineReader(io.StringIO("a\nb"), 4))  # ['a\n', 'b']
len(LinkedList([1, 2, 3]))         # 3
```

## `cubscape.minilibx`

- `colors.mask_shifts(red_mask, green_mask, blue_mask)` returns a
  `ChannelShifts` that holds each channel's bit position and width.
  `colors.good_color(color, depth, shifts)` packs a `0xRRGGBB` colour into a
  pixel value. At a depth below 24 the channels are packed to fit. At depth 24
  or more the colour is returned unchanged.
- `words.find`, `words.find_unquoted` and `words.split_words` search and split
  text on spaces and tabs.
- `image.Image(width, height)` is a 32-bit little-endian pixel buffer.
  `data_address()` returns `(buffer, bits_per_pixel, bytes_per_line, endian)`.
  `pixel(x, y)` reads one value. `to_surface()` returns a `pygame.Surface`
  copy. After `destroy()`, any further use raises `ImageError`.

```python
from cubscape.minilibx.colors import mask_shifts, good_color
from cubscape.minilibx.image import Image

shifts = mask_shifts(0xF800, 0x07E0, 0x001F)
good_color(0xFFFFFF, 16, shifts)   # 0xFFFF

img = Image(4, 3)
buffer, bpp, size_line, endian = img.data_address()
buffer[0:4] = (0x00FF00).to_bytes(4, "little")
img.pixel(0, 0)                    # 0x00FF00
surface = img.to_surface()
```

## What it does not do

cubscape has no command-line program. It does not read or validate scene
files and does not draw a minimap. It does not open windows and has no display
or event loop. It offers the helpers and the in-memory images described above,
and nothing more.

## Running the tests

```
pip install .[test]
pytest
```