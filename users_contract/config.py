"""
Contract testing configuration
Values come from the environment, optionally seeded from a local .env file
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_BASE_URL = "https://gorest.co.in/public/v2"


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


@dataclass
class TestConfig:
    """Remote Users API contract testing configuration"""

    __test__ = False  # not a pytest test class

    # Remote API
    api_base_url: str = field(default_factory=lambda: _env('USERS_API_BASE_URL', DEFAULT_BASE_URL))
    api_token: str = field(default_factory=lambda: _env('USERS_API_TOKEN'))

    # Transport timeout, the only timeout applied to remote calls
    request_timeout: float = field(default_factory=lambda: float(_env('USERS_API_TIMEOUT_SECONDS', '30')))

    # Test data
    missing_user_id: int = field(default_factory=lambda: int(_env('USERS_MISSING_ID', '999999999')))
    email_domain: str = field(default_factory=lambda: _env('USERS_TEST_EMAIL_DOMAIN', 'example.test'))
    test_data_prefix: str = field(default_factory=lambda: _env('USERS_TEST_DATA_PREFIX', 'contract'))

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if not self.api_base_url:
            errors.append("USERS_API_BASE_URL must not be empty")
        elif not self.api_base_url.startswith(("http://", "https://")):
            errors.append(f"USERS_API_BASE_URL must be an http(s) URL, got {self.api_base_url!r}")

        if not self.api_token:
            errors.append("USERS_API_TOKEN is required for authentication")

        if self.request_timeout <= 0:
            errors.append("USERS_API_TIMEOUT_SECONDS must be positive")

        if self.missing_user_id <= 0:
            errors.append("USERS_MISSING_ID must be a positive integer")

        return errors


def get_config() -> TestConfig:
    """Get validated test configuration"""
    config = TestConfig()
    errors = config.validate()

    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return config
