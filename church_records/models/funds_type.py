from church_records.extensions import db


class FundsType(db.Model):
    __tablename__ = "fund_type"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.Integer, nullable=False)
    modified_at = db.Column(db.Integer, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": self.created_at,
            "modified_at": self.modified_at,
        }

    def __repr__(self):
        return f"FundsType(id={self.id}, name='{self.name}')"
