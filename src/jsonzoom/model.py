"""Data model for inferred class diagrams."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PropertyDescriptor:
    """A single ``key: type`` row of an inferred class."""

    key: str
    type_annotation: str  # primitive, ClassName, ClassName[], or any[]

    def __str__(self) -> str:
        return f"{self.key}: {self.type_annotation}"


@dataclass(frozen=True)
class ClassDescriptor:
    """An inferred class: a name plus its properties in key order."""

    name: str
    properties: tuple[PropertyDescriptor, ...] = ()

    def to_dict(self) -> dict:
        return {"name": self.name, "properties": [str(p) for p in self.properties]}


@dataclass(frozen=True)
class Edge:
    """A directed reference from one class to another."""

    id: str
    source: str
    target: str

    def to_dict(self) -> dict:
        return {"id": self.id, "source": self.source, "target": self.target}


@dataclass
class ClassDiagram:
    """Complete inference result produced by extractors."""

    root_name: str
    classes: list[ClassDescriptor] = field(default_factory=list)
    edges: list[Edge] | None = None  # None in classes-only mode
    cycles: list[list[str]] = field(default_factory=list)

    def to_dict(self) -> dict:
        d: dict = {"classes": [c.to_dict() for c in self.classes]}
        if self.edges is not None:
            d["edges"] = [e.to_dict() for e in self.edges]
        return d
