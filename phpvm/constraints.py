"""Semantic versions and version constraints."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import total_ordering

_IDENT = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"
_VERSION_RE = re.compile(
    r"v?(?P<major>[0-9]+)(?:\.(?P<minor>[0-9]+))?(?:\.(?P<patch>[0-9]+))?"
    rf"(?:-(?P<pre>{_IDENT}))?(?:\+(?P<meta>{_IDENT}))?"
)
_PART = r"(?:[0-9]+|[xX*])"
_CV = rf"v?{_PART}(?:\.{_PART})?(?:\.{_PART})?(?:-{_IDENT})?(?:\+{_IDENT})?"
_OP = r"!=|>=|=>|<=|=<|~>|=|>|<|~|\^"
_TERM = rf"(?:{_OP})?\s*{_CV}"
_GROUP_RE = re.compile(rf"\s*{_TERM}(?:(?:\s*,\s*|\s+){_TERM})*\s*")
_TERM_RE = re.compile(rf"(?P<op>{_OP})?\s*(?P<ver>{_CV})")
_RANGE_RE = re.compile(rf"\s*({_CV})\s+-\s+({_CV})\s*")
_PARTS_RE = re.compile(
    r"v?(?P<major>[0-9]+|[xX*])(?:\.(?P<minor>[0-9]+|[xX*]))?"
    r"(?:\.(?P<patch>[0-9]+|[xX*]))?(?P<rest>(?:[-+].*)?)"
)
_OP_ALIASES = {"": "=", "=>": ">=", "=<": "<=", "~>": "~"}
_WILD = ("x", "X", "*")
_PRERELEASE_REASON = "{} is a prerelease version and the constraint is only looking for release versions"


class VersionParseError(ValueError):
    """Raised for text that is not a semantic version."""


class ConstraintParseError(ValueError):
    """Raised for text that is not a version constraint."""


def _compare_prerelease(a: str, b: str) -> int:
    if a == b:
        return 0
    if not a or not b:
        return 1 if not a else -1
    left, right = a.split("."), b.split(".")
    for x, y in zip(left, right):
        if x == y:
            continue
        if x.isdigit() and y.isdigit():
            return -1 if int(x) < int(y) else 1
        if x.isdigit() != y.isdigit():
            return -1 if x.isdigit() else 1
        return -1 if x < y else 1
    return (len(left) > len(right)) - (len(left) < len(right))


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A semantic version; build metadata does not affect ordering."""

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    metadata: str = ""
    raw: str = field(default="", repr=False)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version, allowing a leading "v" and missing components."""
        match = _VERSION_RE.fullmatch(text)
        if match is None:
            raise VersionParseError(f"invalid semantic version: {text!r}")
        pre = match["pre"] or ""
        if any(i.isdigit() and len(i) > 1 and i[0] == "0" for i in pre.split(".")):
            raise VersionParseError(f"invalid prerelease identifier in {text!r}")
        return cls(int(match["major"]), int(match["minor"] or 0), int(match["patch"] or 0),
                   pre, match["meta"] or "", text)

    def original(self) -> str:
        """The text the version was parsed from."""
        return self.raw or str(self)

    @property
    def _key(self) -> tuple[int, int, int]:
        return self.major, self.minor, self.patch

    def _compare(self, other: Version) -> int:
        if self._key != other._key:
            return -1 if self._key < other._key else 1
        return _compare_prerelease(self.prerelease, other.prerelease)

    def __eq__(self, other: object) -> bool:
        return self._compare(other) == 0 if isinstance(other, Version) else NotImplemented

    def __lt__(self, other: Version) -> bool:
        return self._compare(other) < 0 if isinstance(other, Version) else NotImplemented

    def __hash__(self) -> int:
        return hash((*self._key, self.prerelease))

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        text += f"-{self.prerelease}" if self.prerelease else ""
        return text + (f"+{self.metadata}" if self.metadata else "")


@dataclass(frozen=True)
class _Term:
    op: str
    version: Version
    text: str
    fixed: int = 3  # how many leading components are given exactly

    @classmethod
    def parse(cls, op: str, text: str) -> _Term:
        match = _PARTS_RE.fullmatch(text)
        if match is None:
            raise ConstraintParseError(f"improper constraint: {text}")
        parts = [match["major"], match["minor"], match["patch"]]
        fixed = next((i for i, p in enumerate(parts) if p is None or p in _WILD), 3)
        base = text if fixed == 3 else ".".join(parts[:fixed] + ["0"] * (3 - fixed)) + match["rest"]
        try:
            version = Version.parse(base)
        except VersionParseError as exc:
            raise ConstraintParseError(f"improper constraint: {text}") from exc
        return cls(_OP_ALIASES.get(op, op), version, text, fixed)

    def reason(self, v: Version) -> str | None:
        """Why ``v`` fails this term, or None when it satisfies it."""
        c, op, fixed = self.version, self.op, self.fixed
        if op == "!=" and fixed == 3:
            return None if v != c else f"{v} is equal to {self.text}"
        if v.prerelease and not c.prerelease:
            return _PRERELEASE_REASON.format(v)
        if op == "!=":
            same = fixed == 0 or v.major == c.major and (fixed == 1 or v.minor == c.minor)
            return f"{v} is equal to {self.text}" if same else None
        if op in ("~", "^") or (op == "=" and fixed < 3):
            if v < c:
                return f"{v} is less than {self.text}"
            return self._caret(v) if op == "^" else self._tilde(v)
        ok, message = {
            "=": (v == c, "is not equal to"),
            ">": (self._greater(v), "is less than or equal to"),
            "<": (v < c, "is greater than or equal to"),
            ">=": (v >= c, "is less than"),
            "<=": (self._less_or_equal(v), "is greater than"),
        }[op]
        return None if ok else f"{v} {message} {self.text}"

    def _greater(self, v: Version) -> bool:
        c = self.version
        if self.fixed == 3 or self.fixed == 0 and v.major == c.major:
            return v > c
        if v.major != c.major:
            return v.major > c.major
        return self.fixed == 2 and v.minor > c.minor

    def _less_or_equal(self, v: Version) -> bool:
        c = self.version
        if self.fixed == 3:
            return v <= c
        if v.major != c.major:
            return v.major < c.major
        return self.fixed == 1 or v.minor <= c.minor

    def _tilde(self, v: Version) -> str | None:
        c = self.version
        if self.fixed == 0 or (self.fixed == 3 and c._key == (0, 0, 0)):
            return None
        if v.major != c.major:
            return f"{v} does not have same major version as {self.text}"
        if v.minor != c.minor and self.fixed != 1:
            return f"{v} does not have same major and minor version as {self.text}"
        return None

    def _caret(self, v: Version) -> str | None:
        c = self.version
        if self.fixed == 0:
            return None
        if c.major > 0 or self.fixed == 1:
            n = 1
        elif c.minor > 0 or self.fixed == 2:
            n = 2
        else:
            n = 3
        return None if v._key[:n] == c._key[:n] else f"{v} does not satisfy {self.text}"


@dataclass(frozen=True)
class Constraint:
    """Alternatives separated by "||", each a set of terms that must all hold."""

    groups: tuple[tuple[_Term, ...], ...]
    text: str = ""

    @classmethod
    def parse(cls, text: str) -> Constraint:
        groups = []
        for part in _RANGE_RE.sub(r">= \1, <= \2", text).split("||"):
            if not _GROUP_RE.fullmatch(part):
                raise ConstraintParseError(f"improper constraint: {part.strip()!r}")
            groups.append(tuple(_Term.parse(m["op"] or "", m["ver"]) for m in _TERM_RE.finditer(part)))
        return cls(tuple(groups), text)

    def check(self, version: Version) -> bool:
        """Tell whether the version satisfies the constraint."""
        return not self.validate(version)

    def validate(self, version: Version) -> list[str]:
        """Reasons the version fails; empty when it satisfies the constraint."""
        reasons: list[str] = []
        for group in self.groups:
            failures = [r for term in group if (r := term.reason(version)) is not None]
            if not failures:
                return []
            reasons.extend(failures)
        return reasons

    def __str__(self) -> str:
        return self.text