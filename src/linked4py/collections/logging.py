from enum import StrEnum


class ListOperation(StrEnum):
    ALLOCATE = "ALLOCATE"
    RELEASE = "RELEASE"
    COMPARE = "COMPARE"
    SWAP = "SWAP"
    VISIT = "VISIT"


VERBOSE = 5
