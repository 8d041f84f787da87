from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class Context:
    """One fluent call, linked back to the call it was chained from.

    Nodes only ever point at their parent, so a chain is a finite list that
    renders root first: ``element('#login').within(secs(5)).click()``.
    """

    parent: Optional["Context"]
    name: str
    locator: Optional[str] = None
    argument: Optional[str] = None

    @classmethod
    def singular(
        cls,
        parent: Optional["Context"],
        name: str,
        locator: Optional[str] = None,
        argument: Optional[str] = None,
    ) -> "Context":
        return cls(parent, name, locator, argument)

    def calls(self) -> Iterator["Context"]:
        """Yield the nodes of this chain in the order the calls were made."""
        chain = []
        node = self
        while node is not None:
            chain.append(node)
            node = node.parent
        return reversed(chain)

    def describe(self) -> str:
        parts = [p for p in (self.locator, self.argument) if p is not None]
        return f"{self.name}({', '.join(parts)})"

    def render(self) -> str:
        return ".".join(node.describe() for node in self.calls())

    def as_exception(self, cause: BaseException) -> "FluentExecutionError":
        return FluentExecutionError(self, cause)

    def __str__(self) -> str:
        return self.render()


class FluentExecutionError(Exception):
    """A failure tagged with the fluent call chain that led to it."""

    def __init__(self, context: Context, cause: BaseException):
        super().__init__(
            f"{type(cause).__name__} during invocation of: {context.render()}"
        )
        self.context = context
        self.__cause__ = cause

    @property
    def cause(self) -> BaseException:
        return self.__cause__
