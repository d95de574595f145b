# storefront/repos/label_repo.py
from typing import List, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session


class LabelRepo:
    """Repo dla tabel categories i brands - ta sama struktura (name, label)."""

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    def get_by_name(self, name: str):
        return self.db.execute(
            select(self.model).where(self.model.name == name)
        ).scalar_one_or_none()

    def list_pairs(self) -> List[Tuple[str, str | None]]:
        rows = self.db.execute(select(self.model.name, self.model.label)).all()
        return [(r.name, r.label) for r in rows]

    def create(self, name: str, label: str | None):
        entry = self.model(name=name, label=label or name)
        self.db.add(entry)
        self.db.flush()
        return entry

    def delete(self, entry) -> None:
        self.db.delete(entry)
        self.db.flush()
