from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import desc, func
from sqlalchemy.orm import Session, joinedload

from ..models.todo import Todo


@dataclass(frozen=True)
class TodoPage:
    """
    One page of todos, most recently modified first.
    """
    items: List[Todo]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0

    @property
    def has_next(self) -> bool:
        return self.size > 0 and self.page * self.size < self.total


class TodoRepository:
    """
    Read access to todos with their owning user loaded by the same query.

    Every query here joins ``users`` and populates ``Todo.user`` from that
    join, so walking a page of todos never triggers a per-row user lookup.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def _with_user(self):
        return self._db.query(Todo).options(joinedload(Todo.user))

    def list_ordered_by_recency(self, page: int, size: int) -> TodoPage:
        """
        Return page ``page`` (1-based) of ``size`` todos ordered by
        ``modified_at`` descending, newer ids first on equal timestamps.
        """
        page = max(page, 1)
        size = max(size, 0)
        total = self._db.query(func.count(Todo.id)).scalar() or 0
        items = (
            self._with_user()
            .order_by(desc(Todo.modified_at), desc(Todo.id))
            .offset((page - 1) * size)
            .limit(size)
            .all()
        )
        return TodoPage(items=items, total=total, page=page, size=size)

    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        """Return the todo with its owner, or None if it does not exist."""
        return self._with_user().filter(Todo.id == todo_id).one_or_none()

    def count_by_id(self, todo_id: int) -> int:
        return self._db.query(func.count(Todo.id)).filter(Todo.id == todo_id).scalar() or 0

    def add(self, todo: Todo) -> Todo:
        self._db.add(todo)
        self._db.commit()
        self._db.refresh(todo)
        return todo
