"""A first-fit heap allocator working over a simulated address space.

Small requests are carved out of a break-extended region as blocks
measured in header-sized units; blocks are split on reuse and merged
with free neighbours on release. Large requests, when enabled, get
their own page-aligned mapping instead.
"""

from __future__ import annotations

import dataclasses
from bisect import bisect_left
from dataclasses import dataclass
from operator import attrgetter
from typing import Optional

__all__ = ["Block", "Heap", "HEADER_SIZE", "PAGE_SIZE", "MMAP_THRESHOLD"]

HEADER_SIZE = 32
PAGE_SIZE = 4096
MMAP_THRESHOLD = PAGE_SIZE * 16

_MAP_BASE = 0x7F0000000000


@dataclass
class Block:
    """One block: header address, size and state.

    ``size`` counts header units for heap blocks and bytes for mappings.
    """

    address: int
    size: int
    isfree: bool = False
    mapped: bool = False

    @property
    def data_address(self) -> int:
        return self.address + HEADER_SIZE


def _page_align(length: int) -> int:
    return (length + HEADER_SIZE + PAGE_SIZE - 1) & ~(PAGE_SIZE - 1)


class Heap:
    """Allocator state; ``memory`` holds the bytes of the heap region."""

    def __init__(self, base: int = 0x10000, *, use_mmap: bool = True,
                 limit: Optional[int] = None) -> None:
        self.base = base
        self.use_mmap = use_mmap
        self.limit = limit
        self.memory = bytearray()
        self._break = base
        self._blocks: list[Block] = []
        self._mapped: dict[int, tuple[Block, bytearray]] = {}
        self._map_cursor = _MAP_BASE

    def _map(self, length: int) -> int:
        address = self._map_cursor
        self._map_cursor += length
        return address

    def _index(self, header: int) -> int:
        i = bisect_left(self._blocks, header, key=attrgetter("address"))
        if i == len(self._blocks) or self._blocks[i].address != header:
            raise ValueError(f"{header + HEADER_SIZE:#x} is not an allocated block")
        return i

    def _buffer(self, addr: int) -> tuple[bytearray, int, int]:
        header = addr - HEADER_SIZE
        if header in self._mapped:
            _, data = self._mapped[header]
            return data, 0, len(data)
        block = self._blocks[self._index(header)]
        return self.memory, addr - self.base, block.size * HEADER_SIZE - HEADER_SIZE

    def _split(self, i: int, units: int) -> None:
        block = self._blocks[i]
        upper = Block(block.address + units * HEADER_SIZE, block.size - units, isfree=True)
        block.size = units
        self._blocks.insert(i + 1, upper)

    def malloc(self, size: int) -> int:
        """Allocate ``size`` bytes and return the address of the data."""
        if size < 0:
            raise ValueError("negative allocation size")

        if self.use_mmap and size >= MMAP_THRESHOLD:
            length = _page_align(size)
            block = Block(self._map(length), length, mapped=True)
            self._mapped[block.address] = (block, bytearray(length - HEADER_SIZE))
            return block.data_address

        units = (size + HEADER_SIZE - 1) // HEADER_SIZE + 1

        for i, block in enumerate(self._blocks):
            if block.isfree and block.size >= units:
                if block.size > units:
                    self._split(i, units)
                block.isfree = False
                return block.data_address

        nbytes = units * HEADER_SIZE
        if self.limit is not None and self._break + nbytes > self.base + self.limit:
            raise MemoryError(f"cannot allocate {size} bytes")
        block = Block(self._break, units)
        self._break += nbytes
        self.memory.extend(bytes(nbytes))
        self._blocks.append(block)
        return block.data_address

    def free(self, addr: Optional[int]) -> None:
        """Release the block at ``addr``; ``None`` or 0 is ignored."""
        if not addr:
            return
        header = addr - HEADER_SIZE
        if self._mapped.pop(header, None) is not None:
            return

        i = self._index(header)
        block = self._blocks[i]
        if block.isfree:
            raise ValueError(f"{addr:#x} is already free")

        if i > 0 and self._blocks[i - 1].isfree:
            self._blocks[i - 1].size += block.size
            del self._blocks[i]
            i -= 1
        else:
            block.isfree = True

        if i + 1 < len(self._blocks) and self._blocks[i + 1].isfree:
            self._blocks[i].size += self._blocks[i + 1].size
            del self._blocks[i + 1]

    def calloc(self, nmemb: int, size: int) -> int:
        """Allocate ``nmemb * size`` bytes set to zero."""
        total = nmemb * size
        addr = self.malloc(total)
        buf, offset, _ = self._buffer(addr)
        buf[offset:offset + total] = bytes(total)
        return addr

    def realloc(self, addr: Optional[int], size: int) -> int:
        """Resize the block at ``addr``, keeping its contents; may move it."""
        if not addr:
            return self.malloc(size)
        if size < 0:
            raise ValueError("negative allocation size")

        header = addr - HEADER_SIZE
        if header in self._mapped:
            block, data = self._mapped.pop(header)
            length = _page_align(size)
            new_header = header if length <= block.size else self._map(length)
            capacity = length - HEADER_SIZE
            data = data[:capacity] + bytearray(max(0, capacity - len(data)))
            self._mapped[new_header] = (Block(new_header, length, mapped=True), data)
            return new_header + HEADER_SIZE

        self._index(header)
        new_addr = self.malloc(size)
        src, src_off, capacity = self._buffer(addr)
        count = min(size, capacity)
        chunk = bytes(src[src_off:src_off + count])
        dst, dst_off, _ = self._buffer(new_addr)
        dst[dst_off:dst_off + count] = chunk
        self.free(addr)
        return new_addr

    def blocks(self) -> list[Block]:
        """Copies of the heap blocks in address order (mappings excluded)."""
        return [dataclasses.replace(block) for block in self._blocks]