"""Staff users and login.

Passwords are stored and compared as plaintext. This mirrors the demo
back-office this service replaces; see core.config for the production warning.
"""
from typing import List, Optional

from pharmacare.db.store import EntityStore
from pharmacare.schemas.user import User, UserCreate, UserUpdate
from pharmacare.services.crud import create_record, delete_record, update_record


def list_users(store: EntityStore) -> List[User]:
    return store.users.all()


def get_user(store: EntityStore, user_id: int) -> Optional[User]:
    return store.users.get(user_id)


def get_user_by_username(store: EntityStore, username: str) -> Optional[User]:
    for user in store.users:
        if user.username == username:
            return user
    return None


def create_user(store: EntityStore, data: UserCreate) -> User:
    """
    Raises:
        ValueError: If the username is already taken
    """
    if get_user_by_username(store, data.username):
        raise ValueError(f"Username '{data.username}' is already taken")
    return create_record(store.users, User, data)


def update_user(store: EntityStore, user_id: int, updates: UserUpdate) -> Optional[User]:
    if updates.username is not None:
        existing = get_user_by_username(store, updates.username)
        if existing and existing.id != user_id:
            raise ValueError(f"Username '{updates.username}' is already taken")
    return update_record(store.users, user_id, updates)


def delete_user(store: EntityStore, user_id: int) -> bool:
    return delete_record(store.users, user_id)


def authenticate(store: EntityStore, username: str, password: str) -> Optional[User]:
    """Return the user if username and password match, else None."""
    user = get_user_by_username(store, username)
    if not user or user.password != password:
        return None
    return user
