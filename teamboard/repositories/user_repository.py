from typing import Dict, Iterable, List, Optional

from pymongo.errors import DuplicateKeyError

from teamboard.core.exceptions import ValidationFailure
from teamboard.models.user import User, UserPublic
from teamboard.repositories.base_repository import MongoRepository, to_object_id


class UserRepository(MongoRepository[User]):
    collection = "users"
    model = User
    _indexes_ready: bool = False

    async def ensure_indexes(self) -> None:
        """Create the unique email index once per repository."""
        if self._indexes_ready:
            return
        await self._db.create_index(self.collection, "email", unique=True)
        self._indexes_ready = True

    async def get_by_email(self, email: str) -> Optional[User]:
        doc = await self._db.find_one(self.collection, {"email": email.strip().lower()})
        return self._to_model(doc) if doc else None

    async def create_user(self, name: str, email: str, password_hash: str) -> User:
        await self.ensure_indexes()
        user = User(name=name, email=email.strip().lower(), password_hash=password_hash)
        if await self.get_by_email(user.email) is not None:
            raise ValidationFailure("Email already registered")
        try:
            return await self.create(user)
        except DuplicateKeyError as e:
            # Concurrent signup won the race on the unique index.
            raise ValidationFailure("Email already registered") from e

    async def public_by_ids(self, user_ids: Iterable[str]) -> Dict[str, UserPublic]:
        """Resolve user ids to public views. Unknown or malformed ids are omitted."""
        oids = [oid for oid in (to_object_id(uid) for uid in set(user_ids)) if oid is not None]
        if not oids:
            return {}
        users: List[User] = await self.list_by({"_id": {"$in": oids}})
        return {user.id: UserPublic.from_user(user) for user in users}
