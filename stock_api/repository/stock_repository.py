"""SQLAlchemy implementation of the price observation repository."""
from datetime import datetime
import logging

from sqlalchemy.exc import SQLAlchemyError

from stock_api.domain.entities import PriceObservation, PriceObservationCreate
from stock_api.domain.errors import PersistenceError
from stock_api.domain.interfaces import PriceObservationRepository
from stock_api.repository.models import StockPriceRecord
from stock_api.repository.sqlite_client import SQLiteConnection

logger = logging.getLogger(__name__)


class SQLitePriceObservationRepository(PriceObservationRepository):
    """SQLite implementation for price observation repository."""

    def __init__(self, connection: SQLiteConnection):
        self._conn = connection

    def insert(self, record: PriceObservationCreate) -> PriceObservation:
        """Insert a single observation; created_at is assigned here."""
        row = StockPriceRecord(
            stock_code=record.stock_code,
            stock_name=record.stock_name,
            price=record.price,
            created_at=datetime.now(),
        )
        with self._conn.session() as session:
            try:
                session.add(row)
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"Failed to save price for {record.stock_code}: {e}")
                raise PersistenceError() from e
        return PriceObservation.model_validate(row)
