from pathlib import Path

import yaml

from app import crud
from app.api.deps import get_db_context
from app.models import UserCreate

script_dir = Path(__file__).resolve().parent
data_dir = script_dir.parent / "data"
print(f"Seed data directory: {data_dir}")

users_yaml_path = data_dir / "users.yaml"


def load_yaml_data(file_path: Path) -> dict:
    with open(file_path, encoding="utf-8") as file:
        return yaml.safe_load(file)


def seed_users():
    data = load_yaml_data(users_yaml_path)

    username_to_id = {}
    with get_db_context() as session:
        for user in data.get("users", []):
            user_create = UserCreate.model_validate(user)
            existing = crud.get_user_by_username(
                session=session, username=user_create.username
            )
            if existing is None:
                print(f"Seeding user: {user_create.username}")
                existing = crud.create_user(session=session, user_create=user_create)
            username_to_id[existing.username] = existing.id

        for left, right in data.get("friendships", []):
            print(f"Seeding friendship: {left} <-> {right}")
            crud.create_friendship(
                session=session,
                user_id=username_to_id[left],
                friend_id=username_to_id[right],
            )
        session.commit()


if __name__ == "__main__":
    seed_users()
