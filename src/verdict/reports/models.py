"""Framework-agnostic tree of reported results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawResultNode:
    """A named entry of a test report with its reported verdict.

    Every report format is reduced to the same shape: the root stands for
    the whole report, its children are features, their children scenarios
    and outlines, and an outline's children are its examples.

    A ``synthetic`` node groups children the report itself does not group
    (or groups without reporting a verdict). It has no verdict of its own:
    ``executed`` and ``successful`` are always False and consumers derive
    its result from the children.
    """

    name: str
    executed: bool = False
    successful: bool = False
    children: tuple[RawResultNode, ...] = ()
    synthetic: bool = False

    @classmethod
    def group(cls, name: str, children: list[RawResultNode]) -> RawResultNode:
        """Create a synthetic node over ``children``."""
        return cls(name=name, children=tuple(children), synthetic=True)

    def walk(self):
        """Yield this node and all of its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "executed": self.executed,
            "successful": self.successful,
            "synthetic": self.synthetic,
            "children": [c.to_dict() for c in self.children],
        }
