"""
User accounts: registration, login and profile updates.

Passwords are stored and compared in plaintext so that accounts created
by the desktop client keep working unchanged. This is insecure: before
the service is reachable by anyone other than the local client, passwords
must be stored as salted hashes and compared with a constant-time check.
"""

from .schemas import UserRole, UserCreate, User

__all__ = ["UserRole", "UserCreate", "User"]
