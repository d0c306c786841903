from gral.data.filters.convolution import Convolution
from gral.data.filters.filter import Filter, Mode, resolve_row
from gral.data.filters.median import Median
from gral.data.filters.resize import Resize

__all__ = ["Convolution", "Filter", "Median", "Mode", "Resize", "resolve_row"]
