import pytest

from todo_service.core.auth import AuthUser
from todo_service.core.exceptions import ErrorKind, InvalidRequestError, NotFoundError
from todo_service.models import Comment, Manager, Todo, User, UserRole
from todo_service.schemas.comment import CommentSaveRequest
from todo_service.schemas.manager import ManagerSaveRequest
from todo_service.services.comment import CommentService
from todo_service.services.guards import ensure_todo_has_owner
from todo_service.services.manager import ManagerService


def auth_user(user: User) -> AuthUser:
    return AuthUser(user_id=user.id, email=user.email, user_role=user.user_role)


@pytest.fixture
def people(db_session):
    owner = User(email="owner@example.com", password="x", user_role=UserRole.USER)
    helper = User(email="helper@example.com", password="x", user_role=UserRole.USER)
    db_session.add_all([owner, helper])
    db_session.commit()
    return owner, helper


@pytest.fixture
def todo(db_session, people):
    owner, _ = people
    todo = Todo(title="Plan trip", contents="Book flights", weather="Sunny", user=owner)
    db_session.add(todo)
    db_session.commit()
    return todo


@pytest.fixture(params=["cleared", "deleted"])
def ownerless_todo(request, db_session, people, todo):
    """A todo whose owner reference no longer resolves to a user."""
    owner, _ = people
    if request.param == "cleared":
        todo.user = None
    else:
        db_session.query(Manager).filter(Manager.user_id == owner.id).delete()
        db_session.delete(owner)
    db_session.commit()
    db_session.expire_all()
    return todo


class TestEnsureTodoHasOwner:
    def test_passes_for_owned_todo(self, todo):
        assert ensure_todo_has_owner(todo) is todo

    def test_rejects_todo_without_owner(self):
        todo = Todo(title="t", contents="c", weather=None, user=None)

        with pytest.raises(InvalidRequestError) as exc_info:
            ensure_todo_has_owner(todo)

        assert exc_info.value.kind == ErrorKind.CALLER_FAULT
        assert exc_info.value.message == "invalid request: task has no valid owner"


class TestSaveManager:
    def test_owner_assigns_manager(self, db_session, people, todo):
        owner, helper = people

        manager = ManagerService(db_session).save_manager(
            auth_user(owner), todo.id, ManagerSaveRequest(manager_user_id=helper.id)
        )

        assert manager.id is not None
        assert manager.user.email == "helper@example.com"
        assert manager.todo_id == todo.id

    def test_ownerless_todo_is_a_caller_fault_and_creates_nothing(self, db_session, people, ownerless_todo):
        _, helper = people
        service = ManagerService(db_session)

        with pytest.raises(InvalidRequestError) as exc_info:
            service.save_manager(
                AuthUser(user_id=1, email="owner@example.com", user_role=UserRole.USER),
                ownerless_todo.id,
                ManagerSaveRequest(manager_user_id=helper.id),
            )

        assert exc_info.value.kind == ErrorKind.CALLER_FAULT
        assert exc_info.value.context["todo_id"] == ownerless_todo.id
        assert db_session.query(Manager).filter(Manager.user_id == helper.id).count() == 0

    def test_only_owner_may_assign(self, db_session, people, todo):
        _, helper = people

        with pytest.raises(InvalidRequestError):
            ManagerService(db_session).save_manager(
                auth_user(helper), todo.id, ManagerSaveRequest(manager_user_id=helper.id)
            )

    def test_owner_cannot_assign_self(self, db_session, people, todo):
        owner, _ = people

        with pytest.raises(InvalidRequestError):
            ManagerService(db_session).save_manager(
                auth_user(owner), todo.id, ManagerSaveRequest(manager_user_id=owner.id)
            )

    def test_missing_todo_and_user(self, db_session, people, todo):
        owner, _ = people
        service = ManagerService(db_session)

        with pytest.raises(NotFoundError):
            service.save_manager(auth_user(owner), 999, ManagerSaveRequest(manager_user_id=1))
        with pytest.raises(NotFoundError):
            service.save_manager(auth_user(owner), todo.id, ManagerSaveRequest(manager_user_id=999))


class TestSaveComment:
    def test_ownerless_todo_is_a_caller_fault_and_creates_nothing(self, db_session, people, ownerless_todo):
        _, helper = people

        with pytest.raises(InvalidRequestError):
            CommentService(db_session).save_comment(
                auth_user(helper), ownerless_todo.id, CommentSaveRequest(contents="hello")
            )

        assert db_session.query(Comment).count() == 0

    def test_comment_on_owned_todo(self, db_session, people, todo):
        _, helper = people

        comment = CommentService(db_session).save_comment(
            auth_user(helper), todo.id, CommentSaveRequest(contents="hello")
        )

        assert comment.user.id == helper.id
        assert [c.contents for c in CommentService(db_session).get_comments(todo.id)] == ["hello"]
