class CsvPsqlError(Exception):
    """
    Base exception for all csvpsql errors
    """
    pass


class ConfigurationError(CsvPsqlError):
    """
    Raised when run options are invalid or inconsistent
    """
    pass


class SourceUnavailableError(CsvPsqlError):
    """
    Raised when the row source cannot be opened or read
    """
    pass


class EmptyInputError(CsvPsqlError):
    """
    Raised when the source has no fields or no data rows
    """
    pass


class ColumnCountMismatchError(CsvPsqlError):
    """
    Raised when overridden column names do not match the detected field count
    """
    pass


class RowArityMismatchError(CsvPsqlError):
    """
    Raised when a data row has a different field count than the table
    """
    pass


class UnsupportedColumnCountError(CsvPsqlError):
    """
    Raised when letter naming is requested for more columns than letters exist
    """
    pass


class SchemaAssemblyError(CsvPsqlError):
    """
    Raised when names, types and constraints cannot be zipped into columns
    """
    pass
