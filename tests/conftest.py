"""
Shared fixtures: a five-wine sheet, stub row sources, a loaded store, an API client.
"""
import pytest
from fastapi.testclient import TestClient

from wine_agent.data.store import WineStore
from wine_agent.main import create_app

HEADER = [
    "ID", "Brand Name", "Wine Name", "AVA", "Vintage", "$", "Rating", "Review",
    "Region", "Type", "Main Varietal", "Tasting Date", "Publication Date",
    "Setting", "Purchased/ Provided", "Temp (if not standard)", "Hyperlink",
]

ROWS = [
    ["1", "Acme", "Estate Pinot Noir", "Willamette Valley", "2012", "$45.99", "**** 1/2",
     "Bright cherry and forest floor with subtle oak.", "Oregon", "Red", "Pinot Noir",
     "12/30/2014", "01/15/2015", "Dinner", "Provided", "", "https://example.com/1"],
    ["2", "Quilceda Creek", "Cabernet Sauvignon", "Columbia Valley", "2010", "$150", "*****",
     "Cassis, graphite and polished oak.", "Washington", "Red", "Cabernet Sauvignon",
     "03/01/2013", "04/10/2013", "Tasting", "Purchased", "", "https://example.com/2"],
    ["3", "Acme", "Reserve Chardonnay", "Russian River Valley", "2014", "$32", "***",
     "Lemon curd and toasted brioche.", "California", "White", "Chardonnay",
     "2016-02-10", "2016-03-01", "Tasting", "Provided", "55F", "https://example.com/3"],
    ["4", "Bramble Hill", "Pinot Noir", "Dundee Hills", "2012", "", "*** 1/2",
     "Black cherry, rose petal.", "Oregon", "Red", "Pinot Noir",
     "2015-06-01", "2015-07-01", "Dinner", "Purchased"],
    ["5", "Sunny Slope", "Dry Rosé", "", "NV", "$18", "**",
     "Strawberry and watermelon, oak-free.", "California", "Rosé", "Grenache"],
]


class StubSource:
    """Row source returning queued results; an Exception in the queue is raised."""

    label = "stub sheet"

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    def fetch_rows(self):
        self.calls += 1
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def sheet_rows():
    return [list(HEADER)] + [list(r) for r in ROWS]


@pytest.fixture
def store(sheet_rows):
    return WineStore(StubSource(sheet_rows)).refresh()


@pytest.fixture
def wines(store):
    return store.wines()


@pytest.fixture
def by_id(wines):
    return {w.id: w for w in wines}


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c


@pytest.fixture
def make_source():
    return StubSource
