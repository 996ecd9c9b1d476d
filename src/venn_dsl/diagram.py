"""Turn diagram source into the input a Venn layout/renderer consumes.

Records are split into areas to lay out (sets and intersections, weighted
by ``size``), style overrides keyed by id, and the title drawn above the
diagram.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from venn_dsl.config import VennConfig
from venn_dsl.model.records import (
    Intersection,
    Number,
    Record,
    SetDecl,
    StyleDecl,
    StyleValue,
    Title,
)
from venn_dsl.parser import ParseError, parse_venn

logger = logging.getLogger(__name__)

# Weight used for areas declared without a size.
UNIT_SIZE = 1


@dataclass(frozen=True)
class Area:
    """A set (one id) or an intersection (two or more ids) with its weight."""

    sets: tuple[str, ...]
    size: Number = UNIT_SIZE
    label: str | None = None

    @property
    def is_intersection(self) -> bool:
        return len(self.sets) > 1


@dataclass
class DiagramData:
    """Everything a renderer needs from one diagram definition."""

    title: str = ""
    areas: list[Area] = field(default_factory=list)
    styles: dict[str, dict[str, StyleValue]] = field(default_factory=dict)
    config: VennConfig = field(default_factory=VennConfig)

    def style_for(self, set_id: str) -> dict[str, StyleValue]:
        """Return the style overrides for *set_id* (empty when none)."""
        return dict(self.styles.get(set_id, {}))

    @property
    def sets(self) -> list[Area]:
        return [a for a in self.areas if not a.is_intersection]

    @property
    def intersections(self) -> list[Area]:
        return [a for a in self.areas if a.is_intersection]


def _weight(size: Number | None) -> Number:
    return UNIT_SIZE if size is None else size


def build_diagram(records: Sequence[Record], config: VennConfig | None = None) -> DiagramData:
    """Partition parsed records into areas, styles and title."""
    data = DiagramData(config=config or VennConfig())
    set_areas: list[Area] = []
    intersection_areas: list[Area] = []
    for record in records:
        if isinstance(record, SetDecl):
            set_areas.append(Area(sets=(record.id,), size=_weight(record.size)))
        elif isinstance(record, Intersection):
            intersection_areas.append(
                Area(sets=record.sets, size=_weight(record.size), label=record.label)
            )
        elif isinstance(record, StyleDecl):
            data.styles.setdefault(record.id, {}).update(record.as_dict())
        elif isinstance(record, Title):
            data.title = record.text
    data.areas = set_areas + intersection_areas
    return data


def prepare(source: str, config: VennConfig | None = None) -> DiagramData:
    """Parse *source* and build the renderer input.

    Parse errors are logged and re-raised; nothing partial is returned.
    """
    logger.info("Preparing venn diagram")
    try:
        records = parse_venn(source)
    except ParseError as exc:
        logger.error("Error while parsing venn diagram: %s", exc)
        raise
    data = build_diagram(records, config)
    logger.debug(
        "Venn diagram has %d area(s) and %d styled id(s)", len(data.areas), len(data.styles)
    )
    return data
