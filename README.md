# eslib

A small collection of classic C-library routines written in plain Python.
It has no dependencies. Each routine keeps the limits and quirks of a minimal
libc: narrow character classes, a reduced `printf` conversion set, 32-bit and
64-bit wrap-around, and fixed-size output buffers.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `eslib.charclass`

These are ASCII character tests. Each takes a character code (`int`) or a
one-character string: `isalnum`, `isalpha`, `isdigit`, `islower`, `isupper`,
`isxdigit`, `isprint`, `isspace`, `isblank` and `isascii`. `isspace` is
deliberately narrow, so only space and tab count. `toupper` and `tolower`
return the same kind of value they were given. `class_mask(c)` returns the
class bit mask from the classification table. It accepts codes -128 to 255
and raises `ValueError` outside that range.

### `eslib.strings`

These routines use NUL-terminated string semantics. They work on `str`,
`bytes` or `bytearray`, and a NUL ends the string.

- `strlen`, `strcmp` and `strncmp` follow the usual rules. The comparisons
  return the difference of the first differing characters.
- `strchr`, `strrchr` and `strstr` return the index of the match, or `None`.
- `strncpy(src, n)` returns exactly `n` characters, padded with NULs.
- `memcmp(s1, s2, n)` returns -1, 0 or 1.
- `memmove(buf, dest, src, n)` copies within a `bytearray`. Overlapping
  ranges are safe, and the function returns `dest`.

### `eslib.heap`

`Heap` is a first-fit allocator over a simulated address space. It provides
`malloc`, `free`, `calloc` and `realloc`, and all of them work with integer
addresses. Small blocks are measured in 32-byte header units. A freed block
merges with any free neighbour. With `use_mmap=True`, the default, requests
of 64 KiB or more get their own page-aligned mapping. A `limit` makes
`malloc` raise `MemoryError` when the heap would grow past it.
`blocks()` returns copies of the `Block` records in address order. Each
record has `address`, `size`, `isfree`, `mapped` and `data_address`. The heap
bytes are available as `Heap.memory`.

### `eslib.fmt`

- `snprintf(size, fmt, *args)` formats `args` and requires that the result
  plus a terminator fits in `size`.
- `sprintf(fmt, *args)` formats with no size limit.
- `printf(fmt, *args)` writes to standard output with a 2048-byte limit.

The supported conversions are `%c %s %d %i %u %x %o`, the `l` forms
(`%ld %li %lu %lx %lo`) and `%%`. Width, precision and `-` are accepted and
ignored. Plain conversions wrap their argument to 32 bits and `l`
conversions wrap to 64 bits. A `None` string prints as `(null)`.

The same module also provides:

- `sscanf(s, fmt)`, which reads one number with a single-conversion format
  such as `"%i"`, `"%x"` or `"%lu"`.
- `strtol(s, base)`, which returns `(value, stop_index)`.
- `perror(s, errnum)`, which writes `fail: <s> (<errnum>)` to standard error.
- `puts(s)`, which writes `s` and a newline.

Bad formats, missing arguments, output that does not fit, and input with no
number all raise `FormatError`, which is a `ValueError`.

### `eslib.timeutil`

- `gmtime(t)` and `localtime(t)` break epoch seconds into a `Tm` record.
  Local time is UTC. The record has the fields `sec`, `min`, `hour`, `mday`,
  `mon`, `year`, `wday`, `yday` and `isdst`. `year` counts from 1900 and
  `mon` counts from 0.
- `strftime(fmt, tm, maxsize)` understands `%Y %m %d %H %M %S`, padding
  numbers to two digits. Any other `%x` gives `x`.

### `eslib.udiv`

These are integer division helpers on fixed-width words. Arguments wrap to
the word width.

| Function | Width | Returns | Zero divisor |
| --- | --- | --- | --- |
| `udivsi3` | 32-bit | quotient | quotient 0 |
| `udivmodsi4` | 32-bit | `(quotient, remainder)` | quotient 0 |
| `aeabi_uidiv` | 32-bit | quotient | quotient 0 |
| `udivdi3` | 64-bit | quotient | quotient 0 |
| `udivmoddi4` | 64-bit | `(quotient, remainder)` | raises `ZeroDivisionError` |
| `udivmodti4` | 128-bit | `(quotient, remainder)` | raises `ZeroDivisionError` |
| `udivti3` | 128-bit | quotient | raises `ZeroDivisionError` |

`aeabi_idiv` is a signed 32-bit division that truncates toward zero. A zero
divisor gives 0.

### `eslib.net`

- `bswap16`, `bswap32` and `bswap64` reverse the bytes of a value.
- `htons`, `ntohs`, `htonl` and `ntohl` convert between host order and
  network order, based on the byte order of the running machine.
- `inet_pton(AF_INET, src)` returns the four address bytes. Any other
  family, or a malformed address, raises `ValueError`.
- `gethostbyname(name)` always raises `LookupError`, because there is no
  resolver.

### `eslib.files`

`fopen(path, mode)` returns an unbuffered `File` that wraps a raw
descriptor. `File` provides these methods:

- `read`, `write`, `printf`, `putc` and `puts`.
- `seek`, `tell` and `rewind`.
- `flush` and `close`.

`File` is also a context manager. `open_flags(mode)` maps a mode string to
`os` open flags. `remove(path)` deletes a file, or an empty directory.
`stdin`, `stdout` and `stderr` are ready-made streams on descriptors 0, 1
and 2. `SEEK_SET`, `SEEK_CUR` and `SEEK_END` are provided.

### `eslib.folder`

`opendir(path)` returns a `Dir`. You can call `readdir()` on it until it
returns `None`, or iterate over it. It works as a context manager. Each
entry is a `DirEntry` with `ino` and `name`. `.` and `..` come first, and
names are cut to 255 characters.

## Example

```python
from eslib.fmt import snprintf, sscanf
from eslib.timeutil import gmtime, strftime
from eslib.net import AF_INET, inet_pton
from eslib.heap import Heap

snprintf(2048, "%d-%s/%c abc %u", 1001, "epcss", "u", 1901)
# '1001-epcss/u abc 1901'
sscanf("A818C", "%x")                  # 0xA818C
strftime("%Y-%m-%d", gmtime(0), 64)    # '1970-01-01'
inet_pton(AF_INET, "192.0.2.1")        # b'\xc0\x00\x02\x01'

heap = Heap()
addr = heap.malloc(100)
heap.free(addr)
heap.blocks()                          # one free block
```

## What this package does not do

The package does not:

- map error numbers to messages.
- provide a random number generator.
- read the environment.
- run shell commands, sleep or start threads.

It is a library only, with no command-line program. File and directory
access goes through Python's `os` module, and `eslib.heap` only simulates
memory. It does not hand out real memory.