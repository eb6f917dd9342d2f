"""Authentication service: password hashing, OTP login and JWT sessions."""

import logging
import secrets
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from portfolio.config import Settings, get_settings
from portfolio.exceptions import Expired, InvalidState, Unauthenticated
from portfolio.models.user import User
from portfolio.services.email_queue import EmailQueue

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str, settings: Settings | None = None) -> str:
    """Create a JWT access token."""
    settings = settings or get_settings()
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings | None = None) -> dict | None:
    """Decode and validate a JWT token."""
    settings = settings or get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def generate_otp(length: int = 6) -> str:
    """Generate a numeric one-time code of ``length`` digits (no leading zero)."""
    low = 10 ** (length - 1)
    return str(low + secrets.randbelow(9 * low))


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


class AuthService:
    """Two-step login: password check issues an emailed OTP, OTP check issues a JWT.

    Per-user state moves NoActiveCode -> CodeIssued (login/resend) -> verified,
    with the code cleared on successful verification. A newly issued code
    overwrites any previous one; expiry is only checked when verifying.
    """

    def __init__(self, db: Session, email_queue: EmailQueue, settings: Settings | None = None):
        self.db = db
        self.email_queue = email_queue
        self.settings = settings or get_settings()

    def login(self, email: str, password: str) -> dict:
        """Check credentials and send a fresh OTP to the user's email."""
        user = get_user_by_email(self.db, email)
        if not user or not verify_password(password, user.password_hash):
            raise Unauthenticated("Invalid credentials")

        otp = self._issue_otp(user)
        return self._otp_sent_response(
            user, otp, "OTP sent successfully. Please verify to complete login."
        )

    def resend_otp(self, email: str) -> dict:
        """Issue a new OTP without a password check, superseding any previous one."""
        user = get_user_by_email(self.db, email)
        if not user:
            raise Unauthenticated("User not found")

        otp = self._issue_otp(user)
        return self._otp_sent_response(user, otp, "OTP resent successfully")

    def verify_otp(self, email: str, otp: str) -> tuple[str, User]:
        """Validate the OTP and return ``(access_token, user)``.

        Raises:
            Unauthenticated: unknown user or wrong code (the stored code is kept).
            InvalidState: no code has been issued, or it was already used.
            Expired: the code's validity window has passed.
        """
        user = get_user_by_email(self.db, email)
        if not user:
            raise Unauthenticated("Invalid credentials")

        if not user.otp or not user.otp_expiry:
            raise InvalidState("No OTP found. Please request a new one.")

        if datetime.now(UTC) > _as_utc(user.otp_expiry):
            raise Expired("OTP has expired. Please request a new one.")

        if not secrets.compare_digest(user.otp.encode(), otp.encode()):
            raise Unauthenticated("Invalid OTP")

        # Clear only if the code is still the one we checked; a concurrent
        # verification or re-issue makes this a no-op.
        cleared = (
            self.db.query(User)
            .filter(User.id == user.id, User.otp == otp)
            .update(
                {User.otp: None, User.otp_expiry: None, User.is_verified: True},
                synchronize_session=False,
            )
        )
        self.db.commit()
        if cleared == 0:
            raise InvalidState("No OTP found. Please request a new one.")

        self.db.refresh(user)
        logger.info(f"User {user.id} verified OTP and logged in")
        access_token = create_access_token(user.id, user.email, self.settings)
        return access_token, user

    def _issue_otp(self, user: User) -> str:
        otp = generate_otp(self.settings.otp_length)
        user.otp = otp
        user.otp_expiry = datetime.now(UTC) + timedelta(
            minutes=self.settings.otp_expiration_minutes
        )
        self.db.commit()

        # Enqueue failures propagate: the login fails if the email cannot be queued
        self.email_queue.send_otp_email(user.email, otp, user.name)
        logger.info(f"OTP issued for {user.email}")
        if self.settings.expose_otp_in_response:
            logger.debug(f"OTP for {user.email}: {otp}")
        return otp

    def _otp_sent_response(self, user: User, otp: str, message: str) -> dict:
        return {
            "message": message,
            "email": user.email,
            "otp": otp if self.settings.expose_otp_in_response else None,
        }


def create_user(db: Session, email: str, password: str, name: str) -> User:
    """Create a new user."""
    user = User(email=email, password_hash=get_password_hash(password), name=name)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
