"""
Lightweight test data factory
Generates realistic but clearly-marked user payloads with unique emails
"""

import itertools
import logging
import random
import time
from typing import Iterable, Optional, Set

from faker import Faker

from users_contract.config import TestConfig, get_config
from users_contract.models import (
    Gender,
    PartialUpdateRequest,
    UserCreateRequest,
    UserStatus,
    USER_FIELDS,
)

logger = logging.getLogger(__name__)


class DataFactory:
    """Lightweight test data generator"""

    def __init__(self, config: Optional[TestConfig] = None, seed: Optional[int] = None):
        self.config = config or get_config()
        self.fake = Faker()
        self.random = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
        self._counter = itertools.count(1)
        self.issued_emails: Set[str] = set()

    def _email(self) -> str:
        """Email unique for the lifetime of this factory"""
        while True:
            local = (
                f"{self.config.test_data_prefix}."
                f"{self.fake.user_name()}."
                f"{time.time_ns()}.{next(self._counter)}"
            )
            email = f"{local}@{self.config.email_domain}".lower()
            if email not in self.issued_emails:
                self.issued_emails.add(email)
                logger.debug(f"Generated test email {email}")
                return email

    def _name(self) -> str:
        return self.fake.name()

    def _gender(self) -> str:
        return self.random.choice(list(Gender)).value

    def _status(self) -> str:
        return self.random.choice(list(UserStatus)).value

    def generate_user(self, **overrides) -> UserCreateRequest:
        """Generate a valid creation payload"""
        data = {
            "name": self._name(),
            "email": self._email(),
            "gender": self._gender(),
            "status": self._status(),
        }
        data.update(overrides)
        return UserCreateRequest(**data)

    def generate_partial_update(self, fields: Iterable[str]) -> PartialUpdateRequest:
        """Generate a mapping holding exactly the requested fields, each freshly generated"""
        requested = list(dict.fromkeys(fields))
        unknown = [f for f in requested if f not in USER_FIELDS]
        if unknown:
            raise ValueError(f"Unknown user fields: {', '.join(unknown)}")

        generators = {
            "name": self._name,
            "email": self._email,
            "gender": self._gender,
            "status": self._status,
        }
        return {f: generators[f]() for f in requested}

    def generate_invalid_user(self) -> UserCreateRequest:
        """Payload the API must reject on every field"""
        return UserCreateRequest(
            name="",
            email="invalid-email",
            gender="invalid",
            status="invalid",
        )
