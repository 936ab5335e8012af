from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from helpers.errors import StoreError


class BaseDatamodel:

    def __init__(self, db_client: object):
        self.db_client = db_client

    @contextmanager
    def store_errors(self, operation: str):
        """Re-raise any SQLAlchemy failure inside the block as a StoreError."""
        try:
            yield
        except SQLAlchemyError as e:
            raise StoreError(f"{operation} failed") from e
