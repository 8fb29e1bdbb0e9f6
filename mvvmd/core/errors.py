"""Exceptions raised by the DataManager."""


class DataManagerError(Exception):
    """Base class for DataManager errors."""


class DataManagerConstructionError(DataManagerError):
    """A DataManager could not be constructed. No partial manager exists."""


class DirectInstantiationError(DataManagerConstructionError):
    def __init__(self):
        super().__init__(
            "Do not create direct instances of DataManager, instantiate subclasses instead"
        )


class NoDataSourcesError(DataManagerConstructionError):
    def __init__(self):
        super().__init__("DataManager cannot initialize without data sources")


class DataSourceNotUniquelyInstancedError(DataManagerConstructionError):
    """A data source type could not be instantiated as a single instance."""

    def __init__(self, data_source_type: type):
        self.data_source_type = data_source_type
        super().__init__(
            f"Couldn't instantiate single instance data source {data_source_type.__name__}"
        )


class DuplicateDataSourceIDError(DataManagerConstructionError):
    def __init__(self, data_source_id: str):
        self.data_source_id = data_source_id
        super().__init__(f"Non-unique data source detected: '{data_source_id}'")


class DataSourceNotFoundError(DataManagerError, LookupError):
    def __init__(self, data_source_type: type):
        self.data_source_type = data_source_type
        super().__init__(f"No data source registered for type {data_source_type.__name__}")


class DataSourceTypeConversionError(DataManagerError, TypeError):
    def __init__(self, data_source_id: str):
        self.data_source_id = data_source_id
        super().__init__(f"Data source '{data_source_id}' is not of the requested type")
