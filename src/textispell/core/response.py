"""
Engine response lines -> typed results.

Each line of an `ispell -a` response block starts with a status code:

    *                                   ok
    -                                   compound
    + ROOT                              root
    # ORIGINAL OFFSET                   none
    & ORIGINAL COUNT OFFSET: MISS, ...  miss
    ? ORIGINAL 0 OFFSET: GUESS, ...     guess

Offsets are 1-based byte positions within the analyzed line as the engine
read it; Speller turns them into character positions.
"""

from dataclasses import dataclass, field
from enum import Enum

from textispell.core.errors import ProtocolDesyncError


class ResultType(Enum):
    OK = "ok"
    ROOT = "root"
    MISS = "miss"
    NONE = "none"
    COMPOUND = "compound"
    GUESS = "guess"
    UNKNOWN = "unknown"


CODES = {
    "*": ResultType.OK,
    "-": ResultType.COMPOUND,
    "+": ResultType.ROOT,
    "#": ResultType.NONE,
    "&": ResultType.MISS,
    "?": ResultType.GUESS,
}


@dataclass
class Result:
    type: ResultType
    term: str | None = None
    root: str | None = None
    original: str | None = None
    offset: int | None = None
    count: int | None = None
    misses: list[str] = field(default_factory=list)
    guesses: list[str] = field(default_factory=list)
    commentary: str = ""  # raw engine line

    @property
    def is_correct(self) -> bool:
        return self.type in (ResultType.OK, ResultType.ROOT, ResultType.COMPOUND)

    @property
    def misses_text(self) -> str:
        """Near misses in the engine's space-separated form."""
        return " ".join(self.misses)

    @property
    def guesses_text(self) -> str:
        return " ".join(self.guesses)

    def to_dict(self) -> dict:
        d = {"term": self.term, "type": self.type.value}
        if self.type == ResultType.ROOT:
            d["root"] = self.root
        elif self.type == ResultType.NONE:
            d["original"] = self.original
            d["offset"] = self.offset
        elif self.type in (ResultType.MISS, ResultType.GUESS):
            d["original"] = self.original
            d["offset"] = self.offset
            d["count"] = self.count
            d["misses"] = list(self.misses)
            d["guesses"] = list(self.guesses)
        elif self.type == ResultType.UNKNOWN:
            d["commentary"] = self.commentary
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "Result":
        return cls(
            type=ResultType(d["type"]),
            term=d.get("term"),
            root=d.get("root"),
            original=d.get("original"),
            offset=d.get("offset"),
            count=d.get("count"),
            misses=list(d.get("misses", [])),
            guesses=list(d.get("guesses", [])),
            commentary=d.get("commentary", ""),
        )


def _need(args: list[str], n: int, raw_line: str):
    if len(args) < n:
        raise ProtocolDesyncError(
            f"expected at least {n} fields after status code: {raw_line!r}",
            commentary=[raw_line],
        )


def _int(value: str, raw_line: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ProtocolDesyncError(
            f"expected a number, got {value!r}: {raw_line!r}",
            commentary=[raw_line],
        ) from None


def parse_response(raw_line: str) -> Result:
    """
    Decode one response line. The returned result has no term yet.

    Raises ProtocolDesyncError if the line has too few fields for its
    status code.
    """
    parts = raw_line.split()
    code, args = (parts[0], parts[1:]) if parts else ("", [])
    rtype = CODES.get(code, ResultType.UNKNOWN)
    result = Result(type=rtype, commentary=raw_line)

    if rtype in (ResultType.OK, ResultType.COMPOUND, ResultType.UNKNOWN):
        pass
    elif rtype == ResultType.ROOT:
        _need(args, 1, raw_line)
        result.root = args[0]
    elif rtype == ResultType.NONE:
        _need(args, 2, raw_line)
        result.original = args[0]
        result.offset = _int(args[1], raw_line)
    elif rtype in (ResultType.MISS, ResultType.GUESS):
        # count is always 0 for guesses, so everything lands in guesses
        _need(args, 3, raw_line)
        result.original = args[0]
        result.count = _int(args[1], raw_line)
        result.offset = _int(args[2].removesuffix(":"), raw_line)
        # candidates are ", " separated and may themselves contain spaces
        # (run-together suggestions such as "hello there")
        tail = raw_line.split(None, 4)[4] if len(args) > 3 else ""
        candidates = [c.strip() for c in tail.split(",") if c.strip()]
        if len(candidates) < result.count:
            raise ProtocolDesyncError(
                f"expected {result.count} near misses: {raw_line!r}",
                commentary=[raw_line],
            )
        result.misses = candidates[:result.count]
        result.guesses = candidates[result.count:]
    else:
        raise AssertionError(f"unhandled result type {rtype}")

    return result
