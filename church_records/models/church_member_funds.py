from church_records.extensions import db


class ChurchMemberFunds(db.Model):
    __tablename__ = "fund"

    id = db.Column(db.Integer, primary_key=True)
    member_id = db.Column(db.Integer, db.ForeignKey("member.id"), nullable=False)
    amount = db.Column(db.Float, nullable=False)
    endow_date = db.Column(db.Text, nullable=True)  # ISO date, YYYY-MM-DD
    fund_type_id = db.Column(db.Integer, db.ForeignKey("fund_type.id"), nullable=False)
    created_at = db.Column(db.Integer, nullable=False)
    modified_at = db.Column(db.Integer, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "member_id": self.member_id,
            "amount": self.amount,
            "endow_date": self.endow_date,
            "fund_type_id": self.fund_type_id,
            "created_at": self.created_at,
            "modified_at": self.modified_at,
        }

    def __repr__(self):
        return (
            f"ChurchMemberFunds("
            f"id={self.id}, "
            f"member_id={self.member_id}, "
            f"amount={self.amount}, "
            f"fund_type_id={self.fund_type_id}"
            f")"
        )
