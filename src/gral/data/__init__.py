from gral.data.events import DataChangeEvent, DataListener
from gral.data.kernel import Kernel
from gral.data.series import DataSeries
from gral.data.source import Column, DataSource, Row, is_numeric_type
from gral.data.statistics import Statistics
from gral.data.table import Ascending, DataTable, Descending

__all__ = [
    "Ascending",
    "Column",
    "DataChangeEvent",
    "DataListener",
    "DataSeries",
    "DataSource",
    "DataTable",
    "Descending",
    "Kernel",
    "Row",
    "Statistics",
    "is_numeric_type",
]
