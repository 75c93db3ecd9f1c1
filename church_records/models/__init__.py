from church_records.models.church import Church
from church_records.models.church_member import ChurchMember
from church_records.models.funds_type import FundsType
from church_records.models.church_member_funds import ChurchMemberFunds
from church_records.models.ids import (
    ChurchId,
    ChurchMemberId,
    FundTypeId,
    ChurchMemberFundsId,
)
