import pytest

from uri3986 import Uri
from uri3986 import UriParser3986


@pytest.fixture()
def uri():
    return Uri()


@pytest.fixture(scope="session")
def uri_parser():
    return UriParser3986()
