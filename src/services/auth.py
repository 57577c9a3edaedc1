"""Authentication service for password and access token handling."""

import logging
import secrets

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.exceptions import DuplicateIdentityError, InvalidCredentialsError, UnauthenticatedError
from src.models.user import User

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
DEFAULT_TOKEN_BYTES = 64

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def generate_access_token(nbytes: int = DEFAULT_TOKEN_BYTES) -> str:
    """Generate an opaque access token."""
    return secrets.token_hex(nbytes)


def extract_bearer_token(authorization: str | None) -> str | None:
    """Pull the token out of an Authorization header value."""
    if not authorization:
        return None
    token = authorization
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX) :]
    token = token.strip()
    return token or None


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email (case-insensitive)."""
    return db.query(User).filter(User.email == email.strip().lower()).first()


def get_user_by_token(db: Session, token: str) -> User | None:
    """Get the user owning an access token."""
    return db.query(User).filter(User.access_token == token).first()


def resolve_identity(db: Session, authorization: str | None) -> User:
    """Resolve an Authorization header to the user it identifies.

    Raises:
        UnauthenticatedError: header missing, malformed or token unknown.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise UnauthenticatedError()

    user = get_user_by_token(db, token)
    if user is None:
        raise UnauthenticatedError()
    return user


def create_user(
    db: Session,
    email: str,
    password: str,
    token_bytes: int = DEFAULT_TOKEN_BYTES,
) -> User:
    """Create a new user with a fresh access token.

    Raises:
        DuplicateIdentityError: a user with this email already exists.
    """
    normalized = email.strip().lower()
    if get_user_by_email(db, normalized):
        logger.info(f"Signup rejected, email already registered: {normalized}")
        raise DuplicateIdentityError()

    user = User(
        email=normalized,
        password_hash=get_password_hash(password),
        access_token=generate_access_token(token_bytes),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Another signup claimed the email after the lookup above
        db.rollback()
        logger.info(f"Signup lost race for email: {normalized}")
        raise DuplicateIdentityError() from None
    db.refresh(user)
    logger.info(f"Created user {user.id}")
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Unknown email and wrong password fail the same way.

    Raises:
        InvalidCredentialsError: credentials do not match a user.
    """
    user = get_user_by_email(db, email)
    if user is None:
        # Spend the same hashing time as a real check
        pwd_context.dummy_verify()
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash):
        logger.info(f"Login failed for user {user.id}")
        raise InvalidCredentialsError()
    return user
