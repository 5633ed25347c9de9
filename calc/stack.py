from typing import Generic, List, Optional, Tuple, TypeVar

from .config import max_stack_depth
from .errors import MalformedProgram, StackOverflow

T = TypeVar("T")


class BoundedStack(Generic[T]):
    """List-backed stack that refuses to grow past ``capacity``."""

    def __init__(self, name: str, capacity: Optional[int] = None):
        self.name = name
        self.capacity = max_stack_depth(capacity)
        self._items: List[T] = []

    def push(self, item: T, pos: Optional[int] = None):
        if len(self._items) >= self.capacity:
            raise StackOverflow(f"{self.name} stack exceeds {self.capacity} entries", pos)
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise MalformedProgram(f"pop on empty {self.name} stack")
        return self._items.pop()

    def top(self) -> Optional[T]:
        return self._items[-1] if self._items else None

    def below_top(self) -> Optional[T]:
        return self._items[-2] if len(self._items) > 1 else None

    def snapshot(self) -> Tuple[T, ...]:
        return tuple(self._items)

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __iter__(self):
        return iter(self._items)
