import logging
from contextlib import contextmanager
from sqlalchemy.orm import Session


class BaseService:
    """
    Shared plumbing for the service layer: the request's session, a logger
    named after the concrete service, and an explicit transaction scope.
    """

    def __init__(self, db: Session):
        self.db = db
        self._logger = logging.getLogger(f"employee_records.services.{type(self).__name__}")

    @contextmanager
    def transaction(self):
        """
        Commit everything done inside the block, or roll all of it back.
        Exceptions are re-raised after the rollback.
        """
        try:
            yield self.db
            self.db.commit()
        except Exception:
            self.db.rollback()
            self._logger.exception("Transaction rolled back")
            raise
