"""
Roster API - In-Memory User Repository
======================================

What:  Owns a list of User records and provides CRUD operations over it.
How:   A plain Python list scanned linearly by id. Ids are assigned as
       (current max id + 1), or 1 for an empty store.
Who:   One instance per lesson, created by the application factory and
       injected into route handlers (see app/dependencies.py).
When:  Lives as long as the application instance; nothing is persisted.

Concurrency:
    Every public method runs under an RLock. FastAPI may run handlers on
    its threadpool, and id assignment is a read-modify-write of the list.
    The lock covers a single process only; separate worker processes each
    hold their own independent store.

Not-found handling:
    Lookups raise NotFoundError instead of returning None, so route
    handlers never branch on a missing record; the global handler in
    main.py turns it into an empty 404 response.
"""

import dataclasses
import logging
import threading
from typing import Iterable, List

from app.exceptions import NotFoundError
from app.models.user import User
from app.services.validation import require_name

logger = logging.getLogger(__name__)


class UserRepository:
    """
    In-memory store of users keyed by integer id.

    Args:
        seed_names: Names to create on construction, in order (ids 1..n).
        label:      Short name used in log lines to tell lesson stores apart.
    """

    def __init__(self, seed_names: Iterable[str] = (), label: str = "users"):
        self._users: List[User] = []
        self._lock = threading.RLock()
        self.label = label
        for name in seed_names:
            self.create(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list_all(self) -> List[User]:
        """Return a snapshot of every user in insertion order."""
        with self._lock:
            return list(self._users)

    def get_by_id(self, user_id: int) -> User:
        """
        Return the user with the given id.

        Raises:
            NotFoundError: no user has this id
        """
        with self._lock:
            return self._users[self._index_of(user_id)]

    def create(self, name: str) -> User:
        """
        Validate the name and append a new user with the next id.

        Raises:
            ValidationError: blank or missing name (store is unchanged)
        """
        name = require_name(name)
        with self._lock:
            next_id = max((u.id for u in self._users), default=0) + 1
            user = User(id=next_id, name=name)
            self._users.append(user)
            logger.info("[%s] Created user %d (%d total)", self.label, user.id, len(self._users))
            return user

    def update(self, user_id: int, name: str) -> User:
        """
        Replace the name of an existing user; the id never changes.

        The id is looked up before the name is checked, so an unknown id
        reports NotFoundError even when the name is also invalid.

        Raises:
            NotFoundError:   no user has this id
            ValidationError: blank or missing name (store is unchanged)
        """
        with self._lock:
            index = self._index_of(user_id)
            name = require_name(name)
            updated = dataclasses.replace(self._users[index], name=name)
            self._users[index] = updated
            logger.info("[%s] Updated user %d", self.label, user_id)
            return updated

    def delete(self, user_id: int) -> None:
        """
        Remove the user with the given id.

        Raises:
            NotFoundError: no user has this id
        """
        with self._lock:
            del self._users[self._index_of(user_id)]
            logger.info("[%s] Deleted user %d (%d left)", self.label, user_id, len(self._users))

    def _index_of(self, user_id: int) -> int:
        # Linear scan; callers hold the lock
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        logger.debug("[%s] User %s not found", self.label, user_id)
        raise NotFoundError(resource="user", resource_id=user_id)
