from enum import StrEnum


class ChangeStatus(StrEnum):
    """Status written on a ticket change history row"""

    COMPLETED = 'Completed'
