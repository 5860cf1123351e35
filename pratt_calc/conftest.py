import pytest

from pratt_calc.interpreter import Interpreter


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture(autouse=True)
def clean_calc_env(monkeypatch):
    for name in ("PRATT_CALC_PROMPT", "PRATT_CALC_HISTORY_FILE", "PRATT_CALC_LOG_LEVEL", "PRATT_CALC_BANNER"):
        monkeypatch.delenv(name, raising=False)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
