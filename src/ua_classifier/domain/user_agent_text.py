"""Helpers for presenting raw user-agent strings in log messages."""


def truncate_for_log(user_agent: str, max_length: int = 200) -> str:
    """Shorten a user agent so excessively long values don't flood the logs."""
    if max_length <= 3 or len(user_agent) <= max_length:
        return user_agent
    return f"{user_agent[: max_length - 3]}..."
