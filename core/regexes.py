"""Shared regular expressions for job posting validation.

Patterns are meant for ``fullmatch`` so a trailing newline never slips
through, and digits are ASCII only.
"""

from __future__ import annotations

import re

PINCODE_PATTERN = re.compile(r"[0-9]{6}")
"""Indian postal index numbers are exactly six digits."""

COUPON_CODE_PATTERN = re.compile(r"[A-Z0-9]+")
"""Coupon codes are issued in upper-case alphanumerics only."""

AMOUNT_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")
"""Non-negative decimal amount without grouping separators."""

WHOLE_NUMBER_PATTERN = re.compile(r"[0-9]+")
