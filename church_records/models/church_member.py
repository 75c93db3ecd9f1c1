from church_records.extensions import db


class ChurchMember(db.Model):
    __tablename__ = "member"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text, nullable=True)
    address = db.Column(db.Text, nullable=False)
    phone1 = db.Column(db.Text, nullable=False)
    phone2 = db.Column(db.Text, nullable=True)
    church_id = db.Column(db.Integer, db.ForeignKey("church.id"), nullable=False)
    created_at = db.Column(db.Integer, nullable=False)
    modified_at = db.Column(db.Integer, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "address": self.address,
            "phone1": self.phone1,
            "phone2": self.phone2,
            "church_id": self.church_id,
            "created_at": self.created_at,
            "modified_at": self.modified_at,
        }

    def __repr__(self):
        return (
            f"ChurchMember("
            f"id={self.id}, "
            f"name='{self.name}', "
            f"church_id={self.church_id}"
            f")"
        )
