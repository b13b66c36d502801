from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from ..models.manager import Manager


class ManagerRepository:
    """Managers of a todo, each with its user loaded by the same query."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def list_by_todo_id(self, todo_id: int) -> List[Manager]:
        return (
            self._db.query(Manager)
            .options(joinedload(Manager.user))
            .filter(Manager.todo_id == todo_id)
            .order_by(Manager.id)
            .all()
        )

    def get_by_id(self, manager_id: int) -> Optional[Manager]:
        return self._db.get(Manager, manager_id)

    def add(self, manager: Manager) -> Manager:
        self._db.add(manager)
        self._db.commit()
        self._db.refresh(manager)
        return manager

    def delete(self, manager: Manager) -> None:
        self._db.delete(manager)
        self._db.commit()
