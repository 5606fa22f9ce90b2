"""Drawing surfaces the pattern paints onto."""

from dataclasses import dataclass
from typing import Any, List, Protocol, Tuple

import svgwrite


class Surface(Protocol):
    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, x: float, y: float) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def bezier_curve_to(
        self,
        cp1x: float,
        cp1y: float,
        cp2x: float,
        cp2y: float,
        x: float,
        y: float,
    ) -> None: ...

    def close_path(self) -> None: ...

    def fill(self, color: str) -> None: ...


@dataclass(frozen=True)
class _Transform:
    tx: float = 0.0
    ty: float = 0.0
    sx: float = 1.0
    sy: float = 1.0

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        return self.tx + x * self.sx, self.ty + y * self.sy


class SvgSurface:
    """
    Canvas-like surface that turns filled paths into svgwrite <path> elements.
    Path coordinates are transformed into canvas space when emitted.
    """

    def __init__(self, drawing: svgwrite.Drawing) -> None:
        self.drawing = drawing
        self._transform = _Transform()
        self._stack: List[_Transform] = []
        self._path: List[str] = []

    def save(self) -> None:
        self._stack.append(self._transform)

    def restore(self) -> None:
        if not self._stack:
            raise IndexError("restore() without matching save()")
        self._transform = self._stack.pop()

    def translate(self, x: float, y: float) -> None:
        t = self._transform
        self._transform = _Transform(t.tx + x * t.sx, t.ty + y * t.sy, t.sx, t.sy)

    def scale(self, sx: float, sy: float) -> None:
        t = self._transform
        self._transform = _Transform(t.tx, t.ty, t.sx * sx, t.sy * sy)

    def begin_path(self) -> None:
        self._path = []

    def move_to(self, x: float, y: float) -> None:
        px, py = self._transform.apply(x, y)
        self._path.append(f"M {px:.2f},{py:.2f}")

    def bezier_curve_to(
        self,
        cp1x: float,
        cp1y: float,
        cp2x: float,
        cp2y: float,
        x: float,
        y: float,
    ) -> None:
        c1 = self._transform.apply(cp1x, cp1y)
        c2 = self._transform.apply(cp2x, cp2y)
        p = self._transform.apply(x, y)
        self._path.append(
            f"C {c1[0]:.2f},{c1[1]:.2f} {c2[0]:.2f},{c2[1]:.2f} {p[0]:.2f},{p[1]:.2f}"
        )

    def close_path(self) -> None:
        self._path.append("Z")

    def fill(self, color: str) -> None:
        self.drawing.add(self.drawing.path(d=" ".join(self._path), fill=color, stroke="none"))


class RecordingSurface:
    """Records every call as (name, args); handy for determinism checks."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.depth = 0

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def save(self) -> None:
        self.depth += 1
        self._record("save")

    def restore(self) -> None:
        if self.depth == 0:
            raise IndexError("restore() without matching save()")
        self.depth -= 1
        self._record("restore")

    def translate(self, x: float, y: float) -> None:
        self._record("translate", x, y)

    def scale(self, sx: float, sy: float) -> None:
        self._record("scale", sx, sy)

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def bezier_curve_to(
        self,
        cp1x: float,
        cp1y: float,
        cp2x: float,
        cp2y: float,
        x: float,
        y: float,
    ) -> None:
        self._record("bezier_curve_to", cp1x, cp1y, cp2x, cp2y, x, y)

    def close_path(self) -> None:
        self._record("close_path")

    def fill(self, color: str) -> None:
        self._record("fill", color)

    def named(self, name: str) -> List[Tuple[Any, ...]]:
        return [args for call, args in self.calls if call == name]
