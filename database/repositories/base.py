from sqlalchemy.orm import Session


class BaseRepository:
    """Repository bound to a caller-owned Session.

    Transaction scope belongs to the caller (see database.uow.candidate_uow).
    """
    ACTIVE_STATUS = 'active'

    def __init__(self, db: Session):
        self.db = db
