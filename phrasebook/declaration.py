"""Step declarations: a phrase bound to an executable body."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from phrasebook.context import ScenarioContext


class StepKeyword(str, Enum):
    """Gherkin keyword a declaration is registered under."""

    GIVEN = "given"
    WHEN = "when"
    THEN = "then"


@dataclass(frozen=True)
class StepDeclaration:
    """A generated step.

    The phrase is fixed when the generator runs; the body receives the
    scenario context each time the runner executes the step.
    """

    keyword: StepKeyword
    phrase: str
    body: Callable[["ScenarioContext"], None]

    def run(self, context: "ScenarioContext") -> None:
        """Execute the step body against ``context``."""
        self.body(context)

    def __str__(self) -> str:
        return f"{self.keyword.value.capitalize()} {self.phrase}"
