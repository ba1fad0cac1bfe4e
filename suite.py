import sys
import time
import traceback
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'cases': [],
    'outcomes': []
}


class _c:
    """terminal color codes"""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class CheckFailed(AssertionError):
    """raised by assert_that so failed checks can be told apart from crashes."""
    pass


# --- public api ---

def test(description: str) -> Callable:
    """register a function as a test case. the function stays callable on its own."""

    def decorator(func: Callable) -> Callable:
        _registry['cases'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise CheckFailed(message)


@contextmanager
def assert_raises(error_type: Type[BaseException], message: Optional[str] = None):
    """
    expect the block to raise error_type.
    when message is given, the error's text has to contain it.
    """
    try:
        yield
    except error_type as e:
        if message is not None and message not in str(e):
            raise CheckFailed(f"expected {error_type.__name__} containing '{message}', got '{e}'")
    else:
        raise CheckFailed(f"expected {error_type.__name__} to be raised")


def run(title: str = "test run", verbose: bool = False) -> bool:
    """run every registered case, print a report and return true when all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _registry['outcomes'] = []
    for case in _registry['cases']:
        description = case['description']
        error = None
        try:
            case['func']()
        except CheckFailed as e:
            error = f"check failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose:
                traceback.print_exc()

        passed = error is None
        _registry['outcomes'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}pass{_c.reset}  {description}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {description}")
            print(f"    {_c.grey}-> {error}{_c.reset}")

    all_passed = _print_summary(start_time)

    # clear so several modules can run their suites in one process
    _registry['cases'] = []
    return all_passed


def main(title: str) -> None:
    """entry point for `python combinq_tests/<module>.py`"""
    sys.exit(0 if run(title, verbose='-v' in sys.argv) else 1)


def _print_summary(start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    outcomes = _registry['outcomes']

    total = len(outcomes)
    passed_count = sum(1 for o in outcomes if o['passed'])
    failed_count = total - passed_count
    color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    return failed_count == 0
