from church_records.models import Church, ChurchMember
from church_records.repositories.base_repository import BaseRepository, storage_errors


class ChurchRepository(BaseRepository):
    model = Church

    @staticmethod
    @storage_errors
    def count_members(church_id: int) -> int:
        """Counts the members that belong to a church."""
        return ChurchMember.query.filter_by(church_id=church_id).count()
