import pytest

from colkit import Configuration


@pytest.fixture
def people_lines():
    return [
        "Name Age City",
        "Alice 30 Berlin",
        "Bob 5 Paris",
        "Charlie 41 Rome",
    ]


@pytest.fixture
def listing_lines():
    """Pre-formatted `ls -l` style text; fields are separated by runs of spaces."""
    return [
        ".rw-r--r--  dirk  staff   44 KB  Cargo.lock",
        "drwxr-xr-x  dirk  staff    - -   src",
        ".rw-r--r--  dirk  staff  812 B   Cargo.toml",
        ".rwxr-xr-x  dirk  staff    2 KB  build.sh",
    ]


@pytest.fixture
def headerless():
    return Configuration(no_auto_header=True)
