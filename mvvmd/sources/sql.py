"""SQL data source; each service is a database table."""

from typing import Any, Mapping

import pandas as pd
from sqlalchemy import MetaData, Table, insert, select
from sqlalchemy.exc import NoSuchColumnError, SQLAlchemyError

from mvvmd.core.container import Container
from mvvmd.core.protocols import DataSourceState
from .base import BaseDataSource
from .registry import register


class TableDataAccessObject:
    """Reads and writes a single table of a SqlDataSource.

    DAO params act as equality filters on `fetch`.
    """

    def __init__(self, source: "SqlDataSource", service_id: str, table_name: str,
                 params: Mapping[str, str]):
        self.source = source
        self.service_id = service_id
        self.table_name = table_name
        self.params = dict(params)

    def _reflect(self, session: Any) -> Table:
        return Table(self.table_name, MetaData(), autoload_with=session.connection())

    def fetch(self, limit: int | None = None, **filters: Any) -> pd.DataFrame:
        """Select rows matching the DAO params and `filters` into a DataFrame."""
        try:
            with self.source.db_factory.get_session() as session:
                table = self._reflect(session)
                stmt = select(table)
                for column, value in {**self.params, **filters}.items():
                    if column not in table.c:
                        raise NoSuchColumnError(f"Table {self.table_name} has no column {column}")
                    stmt = stmt.where(table.c[column] == value)
                if limit is not None:
                    stmt = stmt.limit(limit)
                df = pd.read_sql(stmt, session.connection())
        except SQLAlchemyError as e:
            self.source.logger.error(f"Reading table {self.table_name} failed: {e}")
            self.source.set_state(DataSourceState.UNAVAILABLE)
            raise

        self.source.set_state(DataSourceState.AVAILABLE)
        return df

    def insert(self, records: list[dict[str, Any]]) -> int:
        """Insert records into the table.

        Returns:
            Number of records written.
        """
        if not records:
            return 0
        try:
            with self.source.db_factory.get_session() as session:
                table = self._reflect(session)
                session.execute(insert(table), records)
        except SQLAlchemyError as e:
            self.source.logger.error(f"Writing table {self.table_name} failed: {e}")
            self.source.set_state(DataSourceState.UNAVAILABLE)
            raise

        self.source.set_state(DataSourceState.AVAILABLE)
        self.source.logger.info(f"Inserted {len(records)} records into {self.table_name}")
        return len(records)


@register
class SqlDataSource(BaseDataSource):
    """Relational database data source; services map to table names."""

    data_source_id = "sql"
    description = "SQL database"

    def __init__(self, container: Container | None = None):
        super().__init__(container)
        self.db_factory = self.container.get_db_session_factory()

    def create_data_access_object(self, service_id: str,
                                  params: Mapping[str, str]) -> TableDataAccessObject | None:
        table_name = self.get_services().get(service_id)
        if table_name is None:
            self.logger.debug(f"Unknown service '{service_id}'")
            return None
        return TableDataAccessObject(self, service_id, table_name, params)
