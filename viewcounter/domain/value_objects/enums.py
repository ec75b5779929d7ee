"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class CounterMethod(str, Enum):
    GET = "GET"
    POST = "POST"
