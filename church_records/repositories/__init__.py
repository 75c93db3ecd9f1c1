from church_records.repositories.church_repository import ChurchRepository
from church_records.repositories.church_member_repository import ChurchMemberRepository
from church_records.repositories.funds_type_repository import FundsTypeRepository
from church_records.repositories.church_member_funds_repository import (
    ChurchMemberFundsRepository,
)
