"""Compiled regular expressions for URLs and command-line request items."""

from __future__ import annotations

import re
from functools import cache

_URL_PATTERN = "".join(
    [
        r"^",
        r"((?P<protocol>https?)://)?",
        r"(?P<host>[a-zA-Z0-9._@+=-]+)",
        r"(:(?P<port>[0-9]{1,6}))?",
        r"(/(?P<routes>[a-zA-Z0-9._@=+/-]+))?",
        r"(/)?",  # optional '/' at the end of the url
        r"(\?)?",  # optional '?' at the end of the url
        r"(\?(?P<query_params>[a-zA-Z0-9._@=+&=-]+))?",
        r"(\#(?P<anchor>[a-zA-Z0-9._-]+))?",
        r"\Z",
    ]
)


@cache
def complete_url() -> re.Pattern[str]:
    """Pattern matching a whole URL, with named groups for each part."""
    return re.compile(_URL_PATTERN)


@cache
def body_value() -> re.Pattern[str]:
    """Pattern for ``key=value`` body items."""
    return re.compile(r"^(?P<key>[ -~]+)=(?P<value>[ -~]+)\Z")


@cache
def nested_body_keys() -> re.Pattern[str]:
    """Pattern for keys such as ``user[address][city]``."""
    return re.compile(r"^(?P<root_key>[^\[\]]+)(?P<sub_keys>(\[([^\[\]]+)\])+)\Z")


@cache
def header_value() -> re.Pattern[str]:
    """Pattern for ``key:value`` header items."""
    return re.compile(r"^(?P<key>[ -~]+):(?P<value>[ -~]+)\Z")


@cache
def query_param_value() -> re.Pattern[str]:
    """Pattern for ``key==value`` query parameter items."""
    return re.compile(r"^(?P<key>[ -~]+)==(?P<value>[ -~]+)\Z")


@cache
def non_string_body_value() -> re.Pattern[str]:
    """Pattern for ``key:=value`` raw JSON body items."""
    return re.compile(r"^(?P<key>[ -~]+):=(?P<value>[ -~]+)\Z")


@cache
def enclosed_by_single_quote_value() -> re.Pattern[str]:
    """Pattern for a value wrapped in single quotes."""
    return re.compile(r"^'(?P<value>[ -~]*)'\Z")


@cache
def enclosed_by_double_quote_value() -> re.Pattern[str]:
    """Pattern for a value wrapped in double quotes."""
    return re.compile(r'^"(?P<value>[ -~]*)"\Z')