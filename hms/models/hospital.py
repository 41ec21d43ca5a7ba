from ..extensions import db


class Hospital(db.Model):
    __tablename__ = "hospitals"

    id: int = db.Column(db.Integer, primary_key=True)
    name: str = db.Column(db.String(255), nullable=False)
    address: str = db.Column(db.String(500), nullable=True)
    phone_number: str = db.Column(db.String(50), nullable=True)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Hospital {self.name}>"
