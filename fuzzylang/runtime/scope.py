"""
Lexically scoped variable environments.

A ScopeStack is an ordered list of Environments, innermost last. Assignment
always binds in the innermost environment (shadowing, never mutating an
outer binding); lookup walks from innermost to the root.

The stack is plain mutable state with no locking. Callers sharing one stack
between threads must serialise enter_scope, exit_scope and assign.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from fuzzylang import get_logger
from fuzzylang.errors import (
    CannotExitRootScopeError,
    ErrorCodes,
    TypeMismatchError,
    UndefinedVariableError,
    ValidationError,
)
from fuzzylang.fuzzy.sets import FuzzySet, validate_element_type

logger = get_logger(__name__)

ROOT_SCOPE_NAME = "global"


@dataclass(frozen=True)
class Binding:
    """
    A name bound to a fuzzy set, with the element type recorded at assignment.

    ``element_type`` of None means the binding accepts any expected type.
    """

    name: str
    value: FuzzySet
    element_type: Optional[type] = None

    def accepts(self, expected_type: Optional[type]) -> bool:
        """Check whether the bound set can be used as a set over ``expected_type``."""
        expected_type = validate_element_type(expected_type, role="expected_type")
        if expected_type is None or self.element_type is None:
            return True
        return issubclass(self.element_type, expected_type)


@dataclass
class Environment:
    """A single binding frame."""

    name: str = "block"
    bindings: Dict[str, Binding] = field(default_factory=dict)

    def lookup(self, name: str) -> Optional[Binding]:
        return self.bindings.get(name)

    def bind(self, binding: Binding) -> None:
        self.bindings[binding.name] = binding

    def __contains__(self, name: str) -> bool:
        return name in self.bindings

    def __len__(self) -> int:
        return len(self.bindings)


class ScopeStack:
    """
    Stack of environments with a root frame that can never be popped.

    Example:
        ```python
        scopes = ScopeStack()
        scopes.assign("hot", hot)

        with scopes.scope("rule"):
            scopes.assign("hot", very_hot)   # shadows the outer binding
            scopes.get("hot")                # very_hot

        scopes.get("hot")                    # hot
        ```
    """

    def __init__(self) -> None:
        self._environments: List[Environment] = [Environment(name=ROOT_SCOPE_NAME)]

    @property
    def depth(self) -> int:
        """Number of environments on the stack (1 when only the root remains)."""
        return len(self._environments)

    @property
    def current(self) -> Environment:
        return self._environments[-1]

    @property
    def root(self) -> Environment:
        return self._environments[0]

    def enter_scope(self, name: str = "block") -> Environment:
        """
        Push a new, empty environment.

        Args:
            name: Label for the environment, used in logs

        Returns:
            The new innermost environment
        """
        environment = Environment(name=name)
        self._environments.append(environment)
        logger.debug(f"Entered scope '{name}' (depth {self.depth})")
        return environment

    def exit_scope(self) -> Environment:
        """
        Pop the innermost environment.

        Returns:
            The environment that was removed

        Raises:
            CannotExitRootScopeError: If only the root environment remains
        """
        if len(self._environments) == 1:
            logger.error("Attempted to exit the root scope")
            raise CannotExitRootScopeError(
                message="Cannot exit the root scope",
                error_code=ErrorCodes.SCOPE_CANNOT_EXIT_ROOT,
                details={"depth": self.depth},
                suggestion="Every exit_scope() must match an earlier enter_scope()",
            )
        environment = self._environments.pop()
        logger.debug(
            f"Exited scope '{environment.name}' with {len(environment)} binding(s) (depth {self.depth})"
        )
        return environment

    @contextmanager
    def scope(self, name: str = "block") -> Iterator[Environment]:
        """
        Context manager that enters a scope and exits it on leaving the block.

        Usage:
            with scopes.scope("rule"):
                scopes.assign("x", some_set)
        """
        environment = self.enter_scope(name)
        try:
            yield environment
        finally:
            self.exit_scope()

    def assign(
        self,
        name: str,
        fuzzy_set: FuzzySet,
        element_type: Optional[type] = None,
    ) -> None:
        """
        Bind ``name`` in the innermost environment, replacing any binding there.

        Outer environments are never touched, so an outer binding of the same
        name is shadowed until this scope is exited.

        Args:
            name: Variable name
            fuzzy_set: Set to bind
            element_type: Element-type tag for the binding; defaults to the set's own tag

        Raises:
            ValidationError: If the name is empty or not a string
            TypeMismatchError: If the value is not a fuzzy set, or the given tag
                contradicts the set's own tag or is not a class
        """
        if not isinstance(name, str) or not name:
            logger.error(f"Invalid variable name: {name!r}")
            raise ValidationError(
                message=f"Variable name must be a non-empty string, got {name!r}",
                error_code=ErrorCodes.SCOPE_INVALID_NAME,
                details={"name": repr(name)},
            )
        if not isinstance(fuzzy_set, FuzzySet):
            logger.error(f"Cannot bind '{name}' to non-set value of type {type(fuzzy_set).__name__}")
            raise TypeMismatchError(
                message=f"Only fuzzy sets can be bound, got {type(fuzzy_set).__name__} for '{name}'",
                error_code=ErrorCodes.TYPE_MISMATCH,
                details={"name": name, "actual_type": type(fuzzy_set).__name__},
            )

        element_type = validate_element_type(element_type)
        set_type = fuzzy_set.element_type
        if element_type is not None and set_type is not None and not issubclass(set_type, element_type):
            logger.error(
                f"Binding '{name}' declared over {element_type.__name__} but set is over {set_type.__name__}"
            )
            raise TypeMismatchError(
                message=f"Set bound to '{name}' is over {set_type.__name__}, not {element_type.__name__}",
                error_code=ErrorCodes.TYPE_MISMATCH,
                details={
                    "name": name,
                    "expected_type": element_type.__name__,
                    "actual_type": set_type.__name__,
                },
            )

        self.current.bind(Binding(name, fuzzy_set, element_type or set_type))
        logger.debug(f"Assigned '{name}' in scope '{self.current.name}' (depth {self.depth})")

    def lookup(self, name: str) -> Binding:
        """
        Find the innermost binding of ``name``.

        Raises:
            UndefinedVariableError: If no environment binds the name
        """
        for environment in reversed(self._environments):
            binding = environment.lookup(name)
            if binding is not None:
                return binding

        logger.warning(f"Undefined variable '{name}' (searched {self.depth} scope(s))")
        raise UndefinedVariableError(
            message=f"Undefined variable '{name}'",
            error_code=ErrorCodes.SCOPE_UNDEFINED_VARIABLE,
            details={"name": name, "scopes_searched": [env.name for env in reversed(self._environments)]},
        )

    def get(self, name: str, expected_type: Optional[type] = None) -> FuzzySet:
        """
        Return the set bound to ``name``, searching innermost to root.

        Args:
            name: Variable name
            expected_type: Element type the caller will use the set with;
                checked against the binding's tag when both are known

        Returns:
            The bound fuzzy set

        Raises:
            UndefinedVariableError: If no environment binds the name
            TypeMismatchError: If the binding's element type does not match, or
                ``expected_type`` is not a class
        """
        binding = self.lookup(name)
        if not binding.accepts(expected_type):
            logger.error(
                f"Variable '{name}' holds a set over {binding.element_type.__name__}, "
                f"requested as {expected_type.__name__}"
            )
            raise TypeMismatchError(
                message=(
                    f"Variable '{name}' is a fuzzy set over {binding.element_type.__name__}, "
                    f"not {expected_type.__name__}"
                ),
                error_code=ErrorCodes.TYPE_MISMATCH,
                details={
                    "name": name,
                    "expected_type": expected_type.__name__,
                    "actual_type": binding.element_type.__name__,
                },
            )
        return binding.value

    def is_defined(self, name: str) -> bool:
        return any(name in environment for environment in self._environments)

    def names(self) -> list[str]:
        """Names visible from the innermost scope, in first-bound order."""
        visible: Dict[str, None] = {}
        for environment in self._environments:
            for name in environment.bindings:
                visible.setdefault(name, None)
        return list(visible)

    def __repr__(self) -> str:
        frames = " > ".join(f"{env.name}[{len(env)}]" for env in self._environments)
        return f"ScopeStack({frames})"
