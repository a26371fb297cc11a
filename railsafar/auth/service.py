import logging
from typing import Optional

from railsafar.store import Store
from railsafar.results import Result, storage_guard
from railsafar.auth.schemas import User, UserCreate

logger = logging.getLogger(__name__)

class UserService:
    """Authentication, registration and profile updates"""

    def __init__(self, store: Store):
        self.store = store

    @storage_guard("authenticating user")
    def authenticate(self, email: str, password: str, role: str) -> Result:
        """Match email (any case), exact password and role (any case)"""
        user = self.store.find_user_by_email(email)
        if not user or user.password != password:
            logger.warning("Failed login attempt for %s", email)
            return Result.not_found("Invalid email or password")
        if user.role.lower() != role.lower():
            logger.warning("Role mismatch on login for %s", email)
            return Result.not_found(f"No {role} account for {email}")
        return Result.success(user)

    @storage_guard("registering user")
    def register(self, user: UserCreate) -> Result:
        """Create a user with the next free id unless the email is taken"""
        with self.store.lock:
            if self.store.find_user_by_email(user.email):
                logger.warning("Registration rejected, email already registered: %s", user.email)
                return Result.conflict("Email already registered")

            # Profile extras (cnic, address, ...) are filled in later via update_user
            db_user = User(
                id=self.store.next_user_id(),
                name=user.name,
                email=user.email,
                phone=user.phone,
                role=user.role,
                password=user.password
            )
            self.store.add_user(db_user)

        logger.info("Registered user %s (%s)", db_user.id, db_user.email)
        return Result.success(db_user)

    @storage_guard("checking email")
    def email_exists(self, email: str, exclude_user_id: Optional[str] = None) -> Result:
        return Result.success(self.store.email_exists(email, exclude_user_id))

    @storage_guard("finding user by id")
    def get_user_by_id(self, user_id: str) -> Result:
        user = self.store.find_user_by_id(user_id)
        if not user:
            return Result.not_found(f"User {user_id} not found")
        return Result.success(user)

    @storage_guard("updating user")
    def update_user(self, user: User) -> Result:
        """Replace a user's profile; the email may not belong to another user"""
        with self.store.lock:
            if not self.store.find_user_by_id(user.id):
                return Result.not_found(f"User {user.id} not found")

            if self.store.email_exists(user.email, user.id):
                logger.warning("Profile update rejected for %s, email in use: %s", user.id, user.email)
                return Result.conflict("Email already exists")

            if not self.store.update_user(user):
                return Result.rejected(f"User {user.id} was not updated")

        return Result.success(user)
