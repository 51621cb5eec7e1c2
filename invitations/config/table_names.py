from enum import Enum


class TableNames(str, Enum):
    GUESTS = "guests"
    HOUSEHOLDS = "households"
    INVITATION_LIST_VERSIONS = "invitation_list_versions"
