import importlib
import pytest

@pytest.fixture(scope="session")
def lexer():
    return importlib.import_module("bytes_lit.lexer")

@pytest.fixture(scope="session")
def encoder():
    return importlib.import_module("bytes_lit.encoder")
