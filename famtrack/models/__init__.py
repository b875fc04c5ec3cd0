from datetime import datetime, timezone
def utcnow():
    return datetime.now(timezone.utc)
from .family import Family
from .participant import Participant
from .activity import Activity
from .participation import ParticipationRecord
from .tier import Tier
