"""
Loading audit trails and customer directories from JSON files.

Shell: I/O lives here and comes back as Result[T, str].
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from returns.result import Failure, Result, Success

from fpplayground.models import Customer
from fpplayground.observability import get_logger
from fpplayground.shell.directory import InMemoryCustomerDirectory

logger = get_logger("history")


def read_json(path: Path) -> Result[Any, str]:
    """Read and decode a JSON document."""
    try:
        return Success(json.loads(path.read_text()))
    except FileNotFoundError:
        return Failure(f"File not found: {path}")
    except PermissionError:
        return Failure(f"Permission denied: {path}")
    except OSError as e:
        return Failure(f"Cannot read {path}: {e.strerror or e}")
    except UnicodeDecodeError:
        return Failure(f"Not UTF-8 text: {path}")
    except json.JSONDecodeError as e:
        return Failure(f"Invalid JSON in {path}: {e}")


def parse_customer(data: Any) -> Result[Customer, str]:
    """Build a Customer from its dictionary form."""
    if not isinstance(data, Mapping):
        return Failure(f"Expected a customer object, got {type(data).__name__}")
    try:
        return Success(Customer.from_dict(data))
    except KeyError as e:
        return Failure(f"Customer is missing field {e.args[0]!r}")
    except (AttributeError, TypeError, ValueError) as e:
        return Failure(f"Malformed customer: {e}")


def parse_history(data: Any) -> Result[tuple[Customer, ...], str]:
    """
    Parse {"customers": [...]} into an ordered trail.

    Stops at the first malformed snapshot, naming its position.
    """
    if not isinstance(data, Mapping) or not isinstance(data.get("customers"), list):
        return Failure('History must be an object with a "customers" list')

    customers: list[Customer] = []
    for index, entry in enumerate(data["customers"]):
        parsed = parse_customer(entry)
        if isinstance(parsed, Failure):
            return parsed.alt(lambda message: f"Snapshot {index}: {message}")
        customers.append(parsed.unwrap())
    return Success(tuple(customers))


def parse_directory(data: Any) -> Result[InMemoryCustomerDirectory, str]:
    """Parse {"customers": {key: customer | null}, "unavailable": [key, ...]}."""
    if not isinstance(data, Mapping) or not isinstance(data.get("customers"), Mapping):
        return Failure('Directory must be an object with a "customers" mapping')
    unavailable = data.get("unavailable", [])
    if not isinstance(unavailable, list):
        return Failure('"unavailable" must be a list of keys')

    customers: dict[str, Customer | None] = {}
    for key, entry in data["customers"].items():
        if entry is None:
            customers[key] = None
            continue
        parsed = parse_customer(entry)
        if isinstance(parsed, Failure):
            return parsed.alt(lambda message: f"Customer {key!r}: {message}")
        customers[key] = parsed.unwrap()
    return Success(InMemoryCustomerDirectory(customers, unavailable))


def load_history(path: Path) -> Result[tuple[Customer, ...], str]:
    """Load an audit trail from a JSON file."""
    logger.debug("load_history", path=str(path))
    result = read_json(path).bind(parse_history)
    if isinstance(result, Failure):
        logger.warning("load_history_failed", path=str(path), error=result.failure())
    return result


def load_directory(path: Path) -> Result[InMemoryCustomerDirectory, str]:
    """Load a customer directory from a JSON file."""
    logger.debug("load_directory", path=str(path))
    result = read_json(path).bind(parse_directory)
    if isinstance(result, Failure):
        logger.warning("load_directory_failed", path=str(path), error=result.failure())
    return result
