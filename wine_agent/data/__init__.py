"""Sheet loading, normalization, value parsing, and the in-memory wine store."""
from .schemas import Wine, WINE_FIELDS, FilterExpression, Comparable, ValueKind, SortOrder
from .normalize import normalize_column_name, build_column_mapping, parse_wine_row, parse_rows, SheetDataError
from .parsers import parse_price, parse_rating, parse_date, parse_vintage, parse_filter_value
from .sources import SheetsSource, CsvSource, build_source
from .store import WineStore, WineSnapshot
