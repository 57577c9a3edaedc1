"""Database seeding from the bundled thoughts file."""

import json
import logging
import secrets
from datetime import datetime
from pathlib import Path
from typing import Any

from sqlalchemy.orm import Session

from src.models.thought import Thought
from src.models.user import User
from src.services.auth import generate_access_token, get_password_hash, get_user_by_email

logger = logging.getLogger(__name__)

SEED_FILE = Path(__file__).resolve().parent.parent / "data" / "thoughts.json"


def load_seed_thoughts(path: Path = SEED_FILE) -> list[dict[str, Any]]:
    """Read seed records from a JSON file."""
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def get_or_create_seed_author(db: Session, email: str) -> User:
    """Get the account that owns seeded thoughts, creating it if needed.

    The password is random and never returned, so nobody can log in as it.
    """
    user = get_user_by_email(db, email)
    if user:
        return user

    user = User(
        email=email.strip().lower(),
        password_hash=get_password_hash(secrets.token_urlsafe(32)),
        access_token=generate_access_token(),
    )
    db.add(user)
    db.flush()
    return user


def seed_thoughts(
    db: Session,
    author_email: str,
    records: list[dict[str, Any]] | None = None,
) -> int:
    """Delete all thoughts and insert the seed records.

    Returns:
        Number of thoughts inserted.
    """
    if records is None:
        records = load_seed_thoughts()

    try:
        deleted = db.query(Thought).delete(synchronize_session=False)
        author = get_or_create_seed_author(db, author_email)

        thoughts = []
        for record in records:
            thought = Thought(
                message=record["message"],
                hearts=record.get("hearts", 0),
                author_id=author.id,
            )
            if record.get("createdAt"):
                thought.created_at = datetime.fromisoformat(record["createdAt"])
            thoughts.append(thought)

        db.add_all(thoughts)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Seeded {len(thoughts)} thoughts (removed {deleted})")
    return len(thoughts)
