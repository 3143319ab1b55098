"""Execution context for carrying state through pipeline steps."""

from dataclasses import dataclass
from types import UnionType
from typing import (
    Any,
    Dict,
    List,
    Literal,
    Mapping,
    Optional,
    Tuple,
    Union,
    get_args,
    get_origin,
)

from .errors import MissingKeyError, TypeMismatchError
from .result import StepExecution


@dataclass(frozen=True)
class ContextKey:
    """Named context key shared between the steps that read and write it."""

    name: str

    def __str__(self) -> str:
        return self.name


KeyLike = Union[str, ContextKey]


def _matches(value: Any, expected_type: Any) -> bool:
    if expected_type is None or expected_type is Any:
        return True
    origin = get_origin(expected_type)
    if origin is Union or origin is UnionType:
        return any(_matches(value, arg) for arg in get_args(expected_type))
    if origin is Literal:
        return value in get_args(expected_type)
    return isinstance(value, origin or expected_type)


class ExecutionContext:
    """
    Shared blackboard passed through a single pipeline run.

    Steps read and write data explicitly; nothing is propagated or
    transformed implicitly. The context also holds the ordered list of
    step executions, appended by the runner only.

    Unlike an immutable stage context, this object is mutated in place:
    every step of a run sees the writes of the steps before it.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = {str(k): v for k, v in (data or {}).items()}
        self._executions: List[StepExecution] = []

    def set(self, key: KeyLike, value: Any) -> None:
        """Store a value, overwriting any previous value for the key."""
        self._data[str(key)] = value

    def get(self, key: KeyLike, expected_type: Any = None) -> Any:
        """
        Get a value from the context.

        Args:
            key: Context key
            expected_type: Optional type the value must be an instance of

        Returns:
            The stored value

        Raises:
            MissingKeyError: If the key is absent
            TypeMismatchError: If the value is not an instance of expected_type
        """
        name = str(key)
        if name not in self._data:
            raise MissingKeyError(name)

        value = self._data[name]
        try:
            matched = _matches(value, expected_type)
        except TypeError as e:
            # type form isinstance() cannot check (e.g. a TypedDict)
            raise TypeMismatchError(name, expected_type, type(value)) from e
        if not matched:
            raise TypeMismatchError(name, expected_type, type(value))
        return value

    def try_get(self, key: KeyLike, expected_type: Any = None) -> Tuple[Any, bool]:
        """Non-raising get. Returns (value, True) or (None, False)."""
        name = str(key)
        if name not in self._data:
            return None, False

        value = self._data[name]
        try:
            matched = _matches(value, expected_type)
        except TypeError:
            matched = False
        if not matched:
            return None, False
        return value, True

    def has(self, key: KeyLike) -> bool:
        """Check if key exists in context."""
        return str(key) in self._data

    def __contains__(self, key: object) -> bool:
        return isinstance(key, (str, ContextKey)) and self.has(key)

    def keys(self) -> list[str]:
        """Get all data keys."""
        return list(self._data.keys())

    @property
    def executions(self) -> Tuple[StepExecution, ...]:
        """Step executions of the run so far, in execution order."""
        return tuple(self._executions)

    def _record_execution(self, execution: StepExecution) -> None:
        self._executions.append(execution)

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dict (for inspection and logging)."""
        return {
            "data": self._data.copy(),
            "executions": [e.to_dict() for e in self._executions],
        }

    def __repr__(self) -> str:
        return (
            f"ExecutionContext(keys={self.keys()}, "
            f"executions={len(self._executions)})"
        )
