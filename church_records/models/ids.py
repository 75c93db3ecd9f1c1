from typing import NewType

ChurchId = NewType("ChurchId", int)
ChurchMemberId = NewType("ChurchMemberId", int)
FundTypeId = NewType("FundTypeId", int)
ChurchMemberFundsId = NewType("ChurchMemberFundsId", int)
