"""Register step declarations with pytest-bdd."""

import logging
import re
from typing import Callable, Iterable, List, Set, Tuple, Union

from pytest_bdd import given, then, when

from phrasebook.context import ScenarioContext
from phrasebook.declaration import StepDeclaration, StepKeyword
from phrasebook.exceptions import DuplicateStep

logger = logging.getLogger(__name__)

_DECORATORS = {
    StepKeyword.GIVEN: given,
    StepKeyword.WHEN: when,
    StepKeyword.THEN: then,
}


def _flatten(
    items: Iterable[Union[StepDeclaration, Iterable[StepDeclaration]]],
) -> List[StepDeclaration]:
    flat: List[StepDeclaration] = []
    for item in items:
        if isinstance(item, StepDeclaration):
            flat.append(item)
        else:
            flat.extend(_flatten(item))
    return flat


def _step_function(declaration: StepDeclaration) -> Callable[[ScenarioContext], None]:
    def step(scenario_context: ScenarioContext) -> None:
        declaration.run(scenario_context)

    step.__name__ = re.sub(r"\W+", "_", f"{declaration.keyword.value}_{declaration.phrase}")
    step.__doc__ = str(declaration)
    return step


def register_steps(
    *declarations: Union[StepDeclaration, Iterable[StepDeclaration]],
    stacklevel: int = 1,
) -> List[StepDeclaration]:
    """Register declarations as pytest-bdd steps in the caller's module.

    pytest-bdd exposes each step as a fixture injected into a module
    namespace, so call this at module level of a conftest.py or test module:

        register_steps(
            given_a("user", {"name": "Duke"}),
            then_should_see("Welcome, Duke"),
        )

    The phrase is matched as an exact string. The generated step function
    takes the ``scenario_context`` fixture (see phrasebook.plugin).

    Args:
        *declarations: Declarations, or iterables of declarations
        stacklevel: Frames above the caller whose namespace receives the
            step fixtures, as in pytest-bdd's own decorators

    Returns:
        The flattened list of registered declarations

    Raises:
        DuplicateStep: If two declarations share keyword and phrase; nothing
            is registered in that case
    """
    registered = _flatten(declarations)
    seen: Set[Tuple[StepKeyword, str]] = set()
    for declaration in registered:
        key = (declaration.keyword, declaration.phrase)
        if key in seen:
            raise DuplicateStep(f"Step declared twice: {declaration}")
        seen.add(key)

    for declaration in registered:
        decorator = _DECORATORS[declaration.keyword](
            declaration.phrase, stacklevel=stacklevel + 1
        )
        decorator(_step_function(declaration))
        logger.debug("✓ Registered %s", declaration)

    logger.info("Registered %d phrasebook steps", len(registered))
    return registered
