from enum import Enum


class LedgerStanding(str, Enum):
    arrears = "arrears"    # balance > 0
    credit = "credit"      # balance < 0
    settled = "settled"
