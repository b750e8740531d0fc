"""Query tools over the in-memory wine snapshot."""
from .common import compare_values, project_field, sort_wines
from .search import search_wines
from .filter import filter_wines, matches_filter
from .details import get_wine_details
from .params import SearchParams, FilterParams, DetailsParams
