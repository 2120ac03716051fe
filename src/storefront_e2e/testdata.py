"""Fixture data loading with ${VAR} environment interpolation."""

import json
import os
import random
import re
import string
import time
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .errors import TestDataError
from .models import Address, CreditCardDetails, RegistrationData

DEFAULT_TEST_DATA = Path(__file__).parent / "data" / "test_data.json"

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


class FixtureModel(BaseModel):
    """Base for fixture records; accepts the camelCase keys of the JSON file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserFixture(FixtureModel):
    first_name: str
    last_name: str
    email: str = ""
    password: str = ""
    gender: str | None = None

    def to_registration(self, email: str | None = None) -> RegistrationData:
        return RegistrationData(
            first_name=self.first_name,
            last_name=self.last_name,
            email=email or self.email,
            password=self.password,
            gender=self.gender,
        )


class ProductFixture(FixtureModel):
    name: str
    url: str
    price: float
    quantity: int = 1


class ProductSets(FixtureModel):
    simple_products: list[ProductFixture] = Field(default_factory=list)
    multiple_products: list[ProductFixture] = Field(default_factory=list)


class AddressFixture(FixtureModel):
    first_name: str
    last_name: str
    country: str
    city: str
    address1: str
    zip: str
    phone: str
    email: str = ""
    state: str = ""

    def to_address(self, email: str | None = None) -> Address:
        return Address(**{**self.model_dump(), "email": email or self.email})


class CreditCardFixture(FixtureModel):
    type: str
    name: str
    number: str
    exp_month: str
    exp_year: str
    cvv: str

    def to_details(self) -> CreditCardDetails:
        return CreditCardDetails(**self.model_dump())


class StoreFixtures(FixtureModel):
    """Everything the browser journeys need from the fixture file."""

    users: dict[str, UserFixture] = Field(default_factory=dict)
    test_products: ProductSets = Field(default_factory=ProductSets)
    addresses: dict[str, AddressFixture] = Field(default_factory=dict)
    credit_card: CreditCardFixture | None = None


def replace_env_variables(obj: Any) -> Any:
    """
    Recursively replace ``${VAR}`` placeholders with environment values.

    Strings inside nested dicts and lists are rewritten; other values pass
    through. Unset (or empty) variables become an empty string.
    """
    if isinstance(obj, str):
        return _PLACEHOLDER.sub(lambda m: os.environ.get(m.group(1), ""), obj)

    if isinstance(obj, list):
        return [replace_env_variables(item) for item in obj]

    if isinstance(obj, dict):
        return {key: replace_env_variables(value) for key, value in obj.items()}

    return obj


def read_fixture_file(path: Path | None = None) -> dict:
    """Read a JSON fixture file and resolve its placeholders."""
    path = path or DEFAULT_TEST_DATA
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise TestDataError(f"Cannot read test data from {path}: {e}") from e
    return replace_env_variables(raw)


def load_test_data(path: Path | None = None) -> StoreFixtures:
    """Load and validate the fixture file (packaged default if no path)."""
    data = read_fixture_file(path)
    try:
        return StoreFixtures.model_validate(data)
    except ValidationError as e:
        raise TestDataError(f"Invalid test data in {path or DEFAULT_TEST_DATA}: {e}") from e


def generate_unique_email(prefix: str = "testuser") -> str:
    """E-mail address unique per call: ``{prefix}_{epoch_ms}_{0..999}@test.com``."""
    timestamp = int(time.time() * 1000)
    return f"{prefix}_{timestamp}_{random.randint(0, 999)}@test.com"


def generate_random_string(length: int = 8) -> str:
    chars = string.ascii_letters + string.digits
    return "".join(random.choice(chars) for _ in range(length))
