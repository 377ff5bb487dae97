"""Shared fixtures: load each Lambda's main.py the way the runtime would."""

import importlib.util
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
LAMBDAS_DIR = ROOT / "backend" / "aws" / "lambdas"
INFRASTRUCTURE_DIR = ROOT / "backend" / "infrastructure"


def load_module(name, path):
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def hello():
    return load_module("hello_main", LAMBDAS_DIR / "hello" / "main.py")


@pytest.fixture
def hello_v3():
    return load_module("hello_v3_main", LAMBDAS_DIR / "hello_v3" / "main.py")


@pytest.fixture(params=["hello", "hello_v3"])
def any_handler(request):
    """Both Lambdas share the same response contract."""
    return request.getfixturevalue(request.param).handler
