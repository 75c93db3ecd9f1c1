from church_records.models import ChurchMember, ChurchMemberFunds
from church_records.repositories.base_repository import BaseRepository, storage_errors


class ChurchMemberRepository(BaseRepository):
    model = ChurchMember

    @staticmethod
    @storage_errors
    def count_funds(member_id: int) -> int:
        """Counts the funds given by a member."""
        return ChurchMemberFunds.query.filter_by(member_id=member_id).count()
