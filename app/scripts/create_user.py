"""
Create the dashboard user, or reset their password.

    python -m app.scripts.create_user ileana@example.com [password] [display name]

Without a password a temporary one is generated and printed.
"""
import sys

from app import models  # noqa: F401
from app.database import Base, SessionLocal, engine
from app.models.user import User
from app.services.passwords import generate_temp_password, hash_password


def upsert_user(db, email: str, password: str, display_name: str | None = None) -> User:
    email = email.lower().strip()
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        user = User(email=email, password_hash=hash_password(password), display_name=display_name)
        db.add(user)
    else:
        user.password_hash = hash_password(password)
        if display_name:
            user.display_name = display_name
    db.commit()
    db.refresh(user)
    return user


def main(argv: list[str]):
    if not argv:
        print(__doc__)
        return 1

    email = argv[0]
    password = argv[1] if len(argv) > 1 else generate_temp_password(12)
    display_name = argv[2] if len(argv) > 2 else None

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        user = upsert_user(db, email, password, display_name)
        print({"id": str(user.id), "email": user.email})
        if len(argv) < 2:
            print(f"Temporary password: {password}")
    finally:
        db.close()
    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
