from users_contract.suites.users import USERS_SCENARIOS

__all__ = ["USERS_SCENARIOS"]
