from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Union

from build123d import BoundBox, Compound, Part

from build123_tubeframe.elements import Tab, TubeSegment

logger = logging.getLogger(__name__)

FramePart = Union[TubeSegment, Tab]


class GeometryKernelError(RuntimeError):
    """The boolean kernel failed to compose the frame."""


@dataclass
class TableFrameModel:
    """Parts of a table frame, composed as one union followed by one difference.

    ``parts`` are the additive solids (tubes and tabs), ``cuts`` the
    subtractive ones (tab holes). Composition order is fixed: every part is
    fused first, then every cut is removed from the fused result.
    """

    name: str = "TableFrame"
    parts: list[FramePart] = field(default_factory=list)
    cuts: list[Part] = field(default_factory=list)

    def add_part(self, part: FramePart) -> None:
        self.parts.append(part)

    def add_parts(self, parts: list[FramePart]) -> None:
        self.parts.extend(parts)

    def add_cut(self, cut: Part) -> None:
        self.cuts.append(cut)

    def add_cuts(self, cuts: list[Part]) -> None:
        self.cuts.extend(cuts)

    def find_by_category(self, category: str) -> list[FramePart]:
        return [p for p in self.parts if p.category == category]

    def find_by_name(self, name: str) -> list[FramePart]:
        return [p for p in self.parts if p.name == name]

    @property
    def tubes(self) -> list[TubeSegment]:
        return [p for p in self.parts if isinstance(p, TubeSegment)]

    @property
    def tabs(self) -> list[Tab]:
        return [p for p in self.parts if isinstance(p, Tab)]

    def get_compound(self) -> Compound:
        """All parts placed but not fused; cheap enough for previews."""
        return Compound([p.global_shape for p in self.parts])

    def bounding_box(self) -> BoundBox:
        return self.get_compound().bounding_box()

    def compose(self) -> Part:
        """Fuse all parts, then cut all holes.

        Raises:
            GeometryKernelError: If there is nothing to compose, the kernel
                raises, or the result has no volume.
        """
        if not self.parts:
            raise GeometryKernelError(f"{self.name} has no parts to compose")

        shapes = [p.global_shape for p in self.parts]
        logger.info("composing %s: fusing %d parts, cutting %d holes", self.name, len(shapes), len(self.cuts))
        try:
            result = shapes[0].fuse(*shapes[1:]) if len(shapes) > 1 else shapes[0]
            if self.cuts:
                result = result.cut(*self.cuts)
        except Exception as exc:
            raise GeometryKernelError(f"boolean operation failed while composing {self.name}: {exc}") from exc

        if result.volume <= 0:
            raise GeometryKernelError(f"composing {self.name} produced a solid with volume {result.volume}")
        logger.info("composed %s: volume %.3f", self.name, result.volume)
        return result

    def __iter__(self) -> Iterator[FramePart]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __repr__(self) -> str:
        return f"TableFrameModel('{self.name}', parts={len(self.parts)}, cuts={len(self.cuts)})"
