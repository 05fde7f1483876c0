"""A parser that splits Compound Text into segments of a single encoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Iterator

__all__ = [
    "XCT_VERSION",
    "CompoundTextError",
    "XctFlags",
    "XctResult",
    "Direction",
    "Item",
    "CompoundTextParser",
]

XCT_VERSION = 1

_HT = 0x09
_NL = 0x0A
_ESC = 0x1B
_CSI = 0x9B

_USED_GRAPHIC = 0x0001
_USED_DIRECTION = 0x0002
_TO_GL = 0x0004

_HAS_C = 1
_HAS_GL = 2
_HAS_GR = 4


def _is_i2(c: int) -> bool:
    return 0x20 <= c <= 0x2F


def _is_i3(c: int) -> bool:
    return 0x30 <= c <= 0x3F


def _is_escf(c: int) -> bool:
    return 0x30 <= c <= 0x7E


def _is_csif(c: int) -> bool:
    return 0x40 <= c <= 0x7E


def _is_c0(c: int) -> bool:
    return c <= 0x1F


def _is_gl(c: int) -> bool:
    return 0x20 <= c <= 0x7F


def _is_c1(c: int) -> bool:
    return 0x80 <= c <= 0x9F


def _is_gr(c: int) -> bool:
    return c >= 0xA0


class CompoundTextError(ValueError):
    """Raised for a syntactic or semantic error in Compound Text."""


class XctFlags(IntFlag):
    """Options that control how Compound Text is split into items."""

    NONE = 0
    SINGLE_SET_SEGMENTS = 0x0001
    PROVIDE_EXTENSIONS = 0x0002
    ACCEPT_C0_EXTENSIONS = 0x0004
    ACCEPT_C1_EXTENSIONS = 0x0008
    HIDE_DIRECTION = 0x0010
    SHIFT_MULTI_GR_TO_GL = 0x0040


class XctResult(Enum):
    """The kind of an item returned by the parser."""

    SEGMENT = 0
    C0_SEGMENT = 1
    GL_SEGMENT = 2
    C1_SEGMENT = 3
    GR_SEGMENT = 4
    EXTENDED_SEGMENT = 5
    EXTENSION = 6
    HORIZONTAL = 7
    END_OF_TEXT = 8


class Direction(Enum):
    """Horizontal text direction."""

    UNSPECIFIED = 0
    LEFT_TO_RIGHT = 1
    RIGHT_TO_LEFT = 2


@dataclass(frozen=True)
class Item:
    """One item of Compound Text with the context it was found in."""

    result: XctResult
    data: bytes
    char_size: int
    encoding: str | None
    horizontal: Direction
    horz_depth: int


_GL_SETS = {0x42: ("B", "ISO8859-1"), 0x4A: ("J", "JISX0201.1976-0")}

_MULTI_GL_SETS = {
    0x41: ("A", "GB2312.1980-0"),
    0x42: ("B", "JISX0208.1983-0"),
    0x43: ("C", "KSC5601.1987-0"),
}

_94_GR_SETS = {0x49: ("I", "JISX0201.1976-0")}

_96_GR_SETS = {
    0x41: ("A", "ISO8859-1"),
    0x42: ("B", "ISO8859-2"),
    0x43: ("C", "ISO8859-3"),
    0x44: ("D", "ISO8859-4"),
    0x46: ("F", "ISO8859-7"),
    0x47: ("G", "ISO8859-6"),
    0x48: ("H", "ISO8859-8"),
    0x4C: ("L", "ISO8859-5"),
    0x4D: ("M", "ISO8859-9"),
}

_MULTI_GR_SETS = {
    0x41: ("A", "GB2312.1980"),
    0x42: ("B", "JISX0208.1983"),
    0x43: ("C", "KSC5601.1987"),
}


class CompoundTextParser:
    """Walk a Compound Text string item by item, tracking its state."""

    def __init__(self, data: bytes, flags: XctFlags = XctFlags.NONE) -> None:
        self.total_string = bytes(data)
        self.flags = XctFlags(flags)
        self._encodings: list[str] = []
        self.reset()

    # -- character set designation -------------------------------------

    def _compute_glgr(self) -> None:
        if (
            self.gl_set_size == 94
            and self.gl_char_size == 1
            and self.gl == "B"
            and self.gr_set_size == 96
            and self.gr_char_size == 1
        ):
            self.glgr_encoding = self.gr_encoding
        elif (
            self.gl_set_size == 94
            and self.gl_char_size == 1
            and self.gl == "J"
            and self.gr_set_size == 94
            and self.gr_char_size == 1
        ):
            self.glgr_encoding = self.gr_encoding
        else:
            self.glgr_encoding = None

    def _handle_gl(self, c: int) -> bool:
        if c not in _GL_SETS:
            return False
        self.gl, self.gl_encoding = _GL_SETS[c]
        self.gl_set_size = 94
        self.gl_char_size = 1
        self._compute_glgr()
        return True

    def _handle_multi_gl(self, c: int) -> bool:
        if c not in _MULTI_GL_SETS:
            return False
        self.gl, self.gl_encoding = _MULTI_GL_SETS[c]
        self.gl_set_size = 94
        self.gl_char_size = 2
        self.glgr_encoding = None
        return True

    def _handle_94_gr(self, c: int) -> bool:
        if c not in _94_GR_SETS:
            return False
        self.gr, self.gr_encoding = _94_GR_SETS[c]
        self._state &= ~_TO_GL
        self.gr_set_size = 94
        self.gr_char_size = 1
        self.glgr_encoding = None
        return True

    def _handle_96_gr(self, c: int) -> bool:
        if c not in _96_GR_SETS:
            return False
        self.gr, self.gr_encoding = _96_GR_SETS[c]
        self._state &= ~_TO_GL
        self.gr_set_size = 96
        self.gr_char_size = 1
        self._compute_glgr()
        return True

    def _handle_multi_gr(self, c: int) -> bool:
        if c not in _MULTI_GR_SETS:
            return False
        shift = bool(self.flags & XctFlags.SHIFT_MULTI_GR_TO_GL)
        self.gr, base = _MULTI_GR_SETS[c]
        self.gr_encoding = f"{base}-{0 if shift else 1}"
        if shift:
            self._state |= _TO_GL
        else:
            self._state &= ~_TO_GL
        self.gr_set_size = 94
        self.gr_char_size = 2
        self.glgr_encoding = None
        return True

    def _handle_extended(self, start: int, c: int) -> bool:
        data = self.total_string
        enc = start + 6
        ptr = enc
        while True:
            if ptr >= self._pos:
                return False
            byte = data[ptr]
            if byte == 0x02:
                break
            if byte == 0:
                return False
            ptr += 1
        self._item = data[ptr + 1 : self._pos]
        raw = data[enc:ptr]
        name = raw.decode("latin-1")
        found = next((known for known in self._encodings if known.startswith(name)), None)
        if found is None:
            for byte in raw:
                if (not _is_gl(byte) and not _is_gr(byte)) or byte in (0x2A, 0x3F):
                    return False
            self._encodings.append(name)
            found = name
        self.encoding = found
        self.char_size = c - 0x30
        return True

    def _shift_gr_to_gl(self, has_c: bool) -> None:
        if has_c:
            self._item = bytes(b & 0x7F if _is_gr(b) else b for b in self._item)
        else:
            self._item = bytes(b & 0x7F for b in self._item)

    # -- public interface ----------------------------------------------

    def reset(self) -> None:
        """Start parsing again from the beginning of the string."""
        data = self.total_string
        self._pos = 0
        self._item = b""
        self._dirstack: list[Direction] = []
        self._state = 0
        self.encoding: str | None = None
        self.char_size = 1
        self.horizontal = Direction.UNSPECIFIED
        self.horz_depth = 0
        self.gl: str | None = None
        self.gl_encoding: str | None = None
        self.gl_set_size = 0
        self.gl_char_size = 0
        self.gr: str | None = None
        self.gr_encoding: str | None = None
        self.gr_set_size = 0
        self.gr_char_size = 0
        self.glgr_encoding: str | None = None
        self._handle_gl(0x42)
        self._handle_96_gr(0x41)
        self.version = 1
        self.can_ignore_exts = False
        if (
            len(data) >= 4
            and data[0] == _ESC
            and data[1] == 0x23
            and _is_i2(data[2])
            and data[3] in (0x30, 0x31)
        ):
            self.version = data[2] - 0x1F
            self.can_ignore_exts = data[3] == 0x30
            self._pos = 4

    def _legal_c0(self, c: int) -> bool:
        return c in (_HT, _NL) or (
            self.version > XCT_VERSION
            and bool(self.flags & XctFlags.ACCEPT_C0_EXTENSIONS)
        )

    def _legal_c1(self) -> bool:
        return self.version > XCT_VERSION and bool(
            self.flags & XctFlags.ACCEPT_C1_EXTENSIONS
        )

    def _direction_misused(self) -> bool:
        return self.horz_depth == 0 and bool(self._state & _USED_DIRECTION)

    def _emit(self, result: XctResult) -> Item:
        return Item(
            result=result,
            data=self._item,
            char_size=self.char_size,
            encoding=self.encoding,
            horizontal=self.horizontal,
            horz_depth=self.horz_depth,
        )

    def _fail(self, message: str) -> CompoundTextError:
        return CompoundTextError(f"{message} at offset {self._pos}")

    def next_item(self) -> Item:
        """Return the next item; raise CompoundTextError on malformed text."""
        data = self.total_string
        end = len(data)
        while self._pos < end:
            start = self._pos
            c = data[start]
            if c == _ESC:
                self._pos += 1
                while self._pos < end and _is_i2(data[self._pos]):
                    self._pos += 1
                if self._pos >= end:
                    raise self._fail("truncated escape sequence")
                c = data[self._pos]
                self._pos += 1
                if not _is_escf(c):
                    raise self._fail("bad escape sequence final byte")
                self._item = data[start : self._pos]
                length = self._pos - start
                kind = data[start + 1]
                if kind == 0x24:
                    if length > 3:
                        if data[start + 2] == 0x28 and self._handle_multi_gl(c):
                            continue
                        if data[start + 2] == 0x29 and self._handle_multi_gr(c):
                            continue
                elif kind == 0x25:
                    if length == 4 and data[start + 2] == 0x2F and c <= 0x3F:
                        if end - self._pos < 2 or data[self._pos] < 0x80 or data[self._pos + 1] < 0x80:
                            raise self._fail("bad extended segment length")
                        size = ((data[self._pos] - 0x80) << 7) + (data[self._pos + 1] - 0x80)
                        self._pos += 2
                        if end - self._pos < size:
                            raise self._fail("truncated extended segment")
                        self._pos += size
                        self._item = data[start : self._pos]
                        if c <= 0x34:
                            if not self._handle_extended(start, c) or self._direction_misused():
                                raise self._fail("bad extended segment")
                            self._state |= _USED_GRAPHIC
                            return self._emit(XctResult.EXTENDED_SEGMENT)
                elif kind == 0x28:
                    if self._handle_gl(c):
                        continue
                elif kind == 0x29:
                    if self._handle_94_gr(c):
                        continue
                elif kind == 0x2D:
                    if self._handle_96_gr(c):
                        continue
            elif c == _CSI:
                self._pos += 1
                while self._pos < end and _is_i3(data[self._pos]):
                    self._pos += 1
                while self._pos < end and _is_i2(data[self._pos]):
                    self._pos += 1
                if self._pos >= end:
                    raise self._fail("truncated control sequence")
                c = data[self._pos]
                self._pos += 1
                if not _is_csif(c):
                    raise self._fail("bad control sequence final byte")
                self._item = data[start : self._pos]
                length = self._pos - start
                if c == 0x5D:
                    if length == 3 and data[start + 1] in (0x31, 0x32):
                        self.horz_depth += 1
                        self._dirstack.append(self.horizontal)
                        self.horizontal = (
                            Direction.LEFT_TO_RIGHT
                            if data[start + 1] == 0x31
                            else Direction.RIGHT_TO_LEFT
                        )
                        if self._state & _USED_GRAPHIC and not self._state & _USED_DIRECTION:
                            raise self._fail("direction change after text")
                        self._state |= _USED_DIRECTION
                        if self.flags & XctFlags.HIDE_DIRECTION:
                            continue
                        return self._emit(XctResult.HORIZONTAL)
                    if length == 2:
                        if not self.horz_depth:
                            raise self._fail("direction end without start")
                        self.horz_depth -= 1
                        self.horizontal = self._dirstack.pop()
                        if self.flags & XctFlags.HIDE_DIRECTION:
                            continue
                        return self._emit(XctResult.HORIZONTAL)
            elif self.flags & XctFlags.SINGLE_SET_SEGMENTS:
                self._pos += 1
                if _is_c0(c):
                    self._item = data[start : self._pos]
                    self.encoding = None
                    self.char_size = 1
                    if self._legal_c0(c):
                        return self._emit(XctResult.C0_SEGMENT)
                elif _is_gl(c):
                    self.encoding = self.gl_encoding
                    self.char_size = self.gl_char_size
                    while self._pos < end and _is_gl(data[self._pos]):
                        self._pos += 1
                    self._item = data[start : self._pos]
                    length = self._pos - start
                    if (self.char_size > 1 and length % self.char_size) or self._direction_misused():
                        raise self._fail("bad GL segment")
                    self._state |= _USED_GRAPHIC
                    return self._emit(XctResult.GL_SEGMENT)
                elif _is_c1(c):
                    self._item = data[start : self._pos]
                    self.encoding = None
                    self.char_size = 1
                    if self._legal_c1():
                        return self._emit(XctResult.C1_SEGMENT)
                else:
                    self.encoding = self.gr_encoding
                    self.char_size = self.gr_char_size
                    while self._pos < end and _is_gr(data[self._pos]):
                        self._pos += 1
                    self._item = data[start : self._pos]
                    length = self._pos - start
                    if (self.char_size > 1 and length % self.char_size) or self._direction_misused():
                        raise self._fail("bad GR segment")
                    self._state |= _USED_GRAPHIC
                    if not self._state & _TO_GL:
                        return self._emit(XctResult.GR_SEGMENT)
                    self._shift_gr_to_gl(False)
                    return self._emit(XctResult.GL_SEGMENT)
            else:
                result = self._general_segment(start, c)
                if result is not None:
                    return result
                self._pos += 1
                self._item = data[start : self._pos]

            if self.version <= XCT_VERSION:
                raise self._fail("unknown control sequence")
            if self.flags & XctFlags.PROVIDE_EXTENSIONS:
                return self._emit(XctResult.EXTENSION)
            if not self.can_ignore_exts:
                raise self._fail("unknown control sequence that cannot be ignored")
        return Item(
            result=XctResult.END_OF_TEXT,
            data=b"",
            char_size=self.char_size,
            encoding=self.encoding,
            horizontal=self.horizontal,
            horz_depth=self.horz_depth,
        )

    def _general_segment(self, start: int, c: int) -> Item | None:
        """Collect a run of mixed C0, C1, GL and GR bytes, or return None."""
        data = self.total_string
        end = len(data)
        shift = bool(self.flags & XctFlags.SHIFT_MULTI_GR_TO_GL)
        bits = 0
        while True:
            if _is_c0(c) or _is_c1(c):
                if c in (_ESC, _CSI):
                    break
                if not (self._legal_c0(c) if _is_c0(c) else self._legal_c1()):
                    break
                bits |= _HAS_C
                self._pos += 1
            else:
                run_start = self._pos
                if _is_gl(c):
                    if shift and bits & _HAS_GR:
                        break
                    self._pos += 1
                    bits |= _HAS_GL
                    while self._pos < end and _is_gl(data[self._pos]):
                        self._pos += 1
                    if self.gl_char_size > 1 and (self._pos - run_start) % self.gl_char_size:
                        raise self._fail("partial GL character")
                else:
                    if shift and bits & _HAS_GL:
                        break
                    self._pos += 1
                    bits |= _HAS_GR
                    while self._pos < end and _is_gr(data[self._pos]):
                        self._pos += 1
                    if self.gr_char_size > 1 and (self._pos - run_start) % self.gr_char_size:
                        raise self._fail("partial GR character")
            if self._pos >= end:
                break
            c = data[self._pos]

        if self._pos == start:
            return None
        self._item = data[start : self._pos]
        if bits & (_HAS_GL | _HAS_GR):
            self._state |= _USED_GRAPHIC
            if self._direction_misused():
                raise self._fail("text outside of a direction")
            if shift and bits & _HAS_GR:
                self._shift_gr_to_gl(bool(bits & _HAS_C))
        if bits == _HAS_GL | _HAS_GR or (self.glgr_encoding and not bits & _HAS_C):
            self.encoding = self.glgr_encoding
            self.char_size = (
                self.gl_char_size if self.gl_char_size == self.gr_char_size else 0
            )
        elif bits == _HAS_GL:
            self.encoding = self.gl_encoding
            self.char_size = self.gl_char_size
        elif bits == _HAS_GR:
            self.encoding = self.gr_encoding
            self.char_size = self.gr_char_size
        else:
            self.encoding = None
            self.char_size = 1
            if bits & _HAS_GL and self.gl_char_size != self.char_size:
                self.char_size = 0
            if bits & _HAS_GR and self.gr_char_size != self.char_size:
                self.char_size = 0
        return self._emit(XctResult.SEGMENT)

    def __iter__(self) -> Iterator[Item]:
        while True:
            item = self.next_item()
            if item.result is XctResult.END_OF_TEXT:
                return
            yield item